from enum import Enum

DEFAULT_STATUS_PAGE_URL = "https://status.web3.storage"


class Mode(str, Enum):
    NO_READ_OR_WRITE = "--"
    READ_ONLY = "r-"
    READ_WRITE = "rw"


MODES: tuple[str, ...] = tuple(mode.value for mode in Mode)
DEFAULT_MODE = Mode.READ_WRITE
