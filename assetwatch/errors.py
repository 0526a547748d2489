"""Exceptions raised by the fleet loader and CLI."""


class AssetWatchError(Exception):
    """Base class for assetwatch errors."""


class AssetNotFoundError(AssetWatchError, KeyError):
    """A vehicle or vendor id did not match anything in the fleet file."""

    def __init__(self, kind: str, asset_id: str):
        self.kind = kind
        self.asset_id = asset_id
        super().__init__(f"{kind} '{asset_id}' not found")

    def __str__(self) -> str:
        return self.args[0]
