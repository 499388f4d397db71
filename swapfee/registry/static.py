"""In-memory token registry for fixed token lists."""

from collections.abc import Iterable

from swapfee.models.token import Token


class StaticTokenRegistry:
    """Token registry over a fixed list of tokens.

    Always ready and fresh. Useful for callers that manage token metadata
    themselves, and for tests.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: dict[str, Token] = {token.asset_id: token for token in tokens}

    def get_token(self, asset_id: str) -> Token | None:
        return self._tokens.get(asset_id)

    def all_tokens(self) -> list[Token]:
        return list(self._tokens.values())

    def is_ready(self) -> bool:
        return True

    def is_fresh(self) -> bool:
        return True

    async def ensure_fresh(self) -> None:
        return None

    @property
    def size(self) -> int:
        return len(self._tokens)
