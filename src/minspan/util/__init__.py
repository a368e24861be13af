
from .validation import (
    check_choice
)

from .io import (
    read_yaml
)

from .cli import (
    generalized_main
)
