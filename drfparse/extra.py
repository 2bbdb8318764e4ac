from enum import Enum, auto

from .errors import UnknownExtraError

EXTRA_SEPARATOR = "<-"


class DRF_EXTRA(Enum):
    FTP = auto()
    LIVEDATA = auto()
    LOGGER = auto()
    LOGGERSINGLE = auto()
    LOGGERDURATION = auto()
    SRFILE = auto()
    SDAFILE = auto()
    REDIR = auto()
    MIRROR = auto()

    @property
    def canonical(self) -> str:
        return f"{EXTRA_SEPARATOR}{self.name}"


DRF_EXTRA_NAMES = {el.name: el for el in DRF_EXTRA}

# Extras that provide their own data (historical/file); events are meaningless for them
HISTORICAL_EXTRAS = frozenset({DRF_EXTRA.LOGGER, DRF_EXTRA.LOGGERSINGLE, DRF_EXTRA.LOGGERDURATION})


def parse_extra(raw_string: str) -> DRF_EXTRA:
    upper = raw_string.upper()
    # Strip colon-delimited parameters (e.g., "LOGGER:123:456" -> "LOGGER")
    name = upper.split(":")[0]
    # Bracket-form dates also use bare name before "["
    name = name.split("[")[0]
    if name not in DRF_EXTRA_NAMES:
        raise UnknownExtraError("Invalid extra", raw_string, 0, raw_string)
    return DRF_EXTRA_NAMES[name]


def split_extra(device_str: str) -> tuple[str, DRF_EXTRA | None]:
    """Split ``device_str`` into (request, extra)."""
    idx = device_str.find(EXTRA_SEPARATOR)
    if idx < 0:
        return device_str, None
    tail = device_str[idx + len(EXTRA_SEPARATOR) :]
    try:
        extra = parse_extra(tail)
    except UnknownExtraError as exc:
        raise UnknownExtraError(exc.message, device_str, idx + len(EXTRA_SEPARATOR), tail) from None
    return device_str[:idx], extra
