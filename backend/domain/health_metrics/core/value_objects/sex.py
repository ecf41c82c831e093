"""Sex value object - selects the Mifflin-St Jeor constant."""

from enum import Enum
from typing import Optional, Union


class Sex(str, Enum):
    """Sex as submitted on the health form.

    - MALE: uses the +5 Mifflin-St Jeor constant
    - FEMALE: uses the -161 constant
    - OTHER: uses the -161 constant as well
    """

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    def bmr_constant(self) -> float:
        """Get the sex-specific constant added to the BMR base.

        Returns:
            float: +5 for male, -161 otherwise

        Example:
            >>> Sex.FEMALE.bmr_constant()
            -161.0
        """
        if self is Sex.MALE:
            return 5.0
        return -161.0

    @classmethod
    def parse(cls, value: Optional[Union["Sex", str]]) -> "Sex":
        """Parse a raw value, treating anything that is not ``male`` as OTHER.

        Matching is exact: "Male" or "MALE" are not recognised.

        Args:
            value: Enum member, raw string or None

        Returns:
            Sex: Parsed value
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.OTHER
        try:
            return cls(str(value))
        except ValueError:
            return cls.OTHER
