from enum import Enum


class CommissionUpdateMode(str, Enum):
    REPLACE = "replace"
    IN_PLACE = "in_place"
