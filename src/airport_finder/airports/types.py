"""Airport category flags.

Each stored airport carries exactly one category bit. Queries take any
union of bits built with ``|``, so "large or medium" is simply
``AirportType.LARGE | AirportType.MEDIUM``.

Typical usage:
    from airport_finder.airports.types import AirportType

    mask = AirportType.LARGE | AirportType.MEDIUM
    if airport.type_flag & mask:
        ...
"""

from enum import IntFlag

from airport_finder.errors import InvalidCategoryError


class AirportType(IntFlag):
    """Airport type classification as combinable bit flags.

    Attributes:
        CLOSED: Closed airport
        HELIPORT: Heliport
        SEAPLANE_BASE: Seaplane base
        SMALL: Small land airport
        MEDIUM: Medium land airport
        LARGE: Large land airport
        ACTIVE: Every category except CLOSED
        RUNWAYS: Land airports (small, medium, large)
        ALL: Every category
    """

    CLOSED = 0x01
    HELIPORT = 0x02
    SEAPLANE_BASE = 0x04
    SMALL = 0x08
    MEDIUM = 0x10
    LARGE = 0x20

    ACTIVE = HELIPORT | SEAPLANE_BASE | SMALL | MEDIUM | LARGE
    RUNWAYS = SMALL | MEDIUM | LARGE
    ALL = CLOSED | ACTIVE

    @classmethod
    def parse(cls, value: str) -> "AirportType | None":
        """Map an OurAirports type string to its flag.

        Args:
            value: Source type string (e.g., "large_airport")

        Returns:
            Matching single flag, or None for unknown types (e.g., "balloonport")

        Examples:
            >>> AirportType.parse("heliport")
            <AirportType.HELIPORT: 2>
        """
        return _TYPE_STRINGS.get(value.strip().lower())

    @classmethod
    def from_string(cls, value: str) -> "AirportType":
        """Map an OurAirports type string to its flag, rejecting unknowns.

        Raises:
            InvalidCategoryError: If the string names no known category.
        """
        flag = cls.parse(value)
        if flag is None:
            raise InvalidCategoryError(f"Unknown airport type: {value!r}")
        return flag

    @classmethod
    def from_names(cls, names: list[str]) -> "AirportType":
        """Build a union from flag names such as ["large", "medium"] or ["ACTIVE"].

        Raises:
            InvalidCategoryError: If a name is unknown or the list is empty.
        """
        mask = 0
        for name in names:
            try:
                mask |= cls[name.strip().upper()]
            except KeyError:
                raise InvalidCategoryError(f"Unknown airport category: {name!r}") from None
        return validate_filter(mask)


_TYPE_STRINGS: dict[str, AirportType] = {
    "closed": AirportType.CLOSED,
    "heliport": AirportType.HELIPORT,
    "seaplane_base": AirportType.SEAPLANE_BASE,
    "small_airport": AirportType.SMALL,
    "medium_airport": AirportType.MEDIUM,
    "large_airport": AirportType.LARGE,
}


def validate_filter(mask: int) -> AirportType:
    """Check that a category mask is a non-empty union of known flags.

    Args:
        mask: Category bitmask

    Returns:
        The mask as an AirportType

    Raises:
        InvalidCategoryError: If the mask is zero or has unknown bits set.
    """
    if mask <= 0 or mask & ~int(AirportType.ALL):
        raise InvalidCategoryError(f"Invalid airport category mask: {int(mask):#x}")
    return AirportType(mask)
