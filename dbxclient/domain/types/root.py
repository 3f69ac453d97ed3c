import enum


class Root(str, enum.Enum):
    """Storage namespace a path is resolved against."""

    SANDBOX = "sandbox"
    DROPBOX = "dropbox"


ROOT_SANDBOX = Root.SANDBOX.value
ROOT_DROPBOX = Root.DROPBOX.value
