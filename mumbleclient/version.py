"""Client version constants and the protocol's packed version number."""

MUMBLE_VERSION_MAJOR = 1
MUMBLE_VERSION_MINOR = 5
MUMBLE_VERSION_PATCH = 0

MUMBLE_RELEASE = "Gumble"

_OFFSET_MAJOR = 48
_OFFSET_MINOR = 32
_OFFSET_PATCH = 16
_UINT64_MASK = (1 << 64) - 1


def get_version_v2(major: int, minor: int, patch: int) -> int:
    """Pack major, minor and patch numbers into a 64-bit version value."""
    packed = (
        (major << _OFFSET_MAJOR) | (minor << _OFFSET_MINOR) | (patch << _OFFSET_PATCH)
    )
    return packed & _UINT64_MASK