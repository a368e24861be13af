
from .read_yaml import (
    read_yaml
)
