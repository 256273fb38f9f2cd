# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 rargs Rui Pinheiro

from collections.abc import Iterable, Mapping

from frozendict import frozendict
from pydantic import Field

from .arg import Arg, ArgKind, ArgValue
from .errors import ArgKindError
from .models import BaseConfigModel
from .util.helpers import FrozenDict


class ParseResults(BaseConfigModel):
    """Immutable outcome of a successful parse, with defaults filled in for unset arguments."""

    flags: FrozenDict[str, bool] = Field(default_factory=frozendict, description="Flag values by argument name")
    options: FrozenDict[str, str] = Field(default_factory=frozendict, description="Option values by argument name")
    words: FrozenDict[str, bool | str] = Field(default_factory=frozendict, description="Word values by argument name")

    @classmethod
    def from_values(cls, args: Iterable[Arg], values: Mapping[str, ArgValue]) -> "ParseResults":
        buckets: dict[ArgKind, dict[str, ArgValue]] = {kind: {} for kind in ArgKind}
        for arg in args:
            assert arg.kind is not None, f"Argument '{arg.name}' has no kind"
            buckets[arg.kind][arg.name] = values.get(arg.name, arg.default)
        return cls(flags=buckets[ArgKind.FLAG], options=buckets[ArgKind.OPTION], words=buckets[ArgKind.WORD])

    def _bucket(self, kind: ArgKind) -> Mapping[str, ArgValue]:
        match kind:
            case ArgKind.FLAG:
                return self.flags
            case ArgKind.OPTION:
                return self.options
            case ArgKind.WORD:
                return self.words

    def _get(self, name: str, kind: ArgKind) -> ArgValue | None:
        bucket = self._bucket(kind)
        if name in bucket:
            return bucket[name]

        for other in ArgKind:
            if other is not kind and name in self._bucket(other):
                msg = f"Argument '{name}' is a {other}, not a {kind}"
                raise ArgKindError(msg)
        return None

    def get_flag(self, name: str) -> bool | None:
        value = self._get(name, ArgKind.FLAG)
        assert value is None or isinstance(value, bool)
        return value

    def get_option(self, name: str) -> str | None:
        value = self._get(name, ArgKind.OPTION)
        assert value is None or isinstance(value, str)
        return value

    def get_word(self, name: str) -> bool | str | None:
        return self._get(name, ArgKind.WORD)

    def __contains__(self, name: object) -> bool:
        return any(name in self._bucket(kind) for kind in ArgKind)
