
from .check import (
    check_choice
)
