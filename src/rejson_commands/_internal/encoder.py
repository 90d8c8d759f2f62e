"""Argument vectors for each JSON command.

Every function returns the ordered arguments that follow the opcode name
on the wire, each already encoded as UTF-8 bytes. Payload values always go
through the codec; nothing is sent as bare text.
"""

from typing import Any, List, Sequence

from rejson_commands._internal.types import Number, PathArg
from rejson_commands.json_helpers import JSONCodec
from rejson_commands.types import ArgumentArityError, ExistenceModifier, Path


def _b(value: str) -> bytes:
    return value.encode("utf-8")


def resolve_path(path: PathArg) -> str:
    """Resolve an optional single path to its wire string.

    None or an empty sequence resolves to the root, one path is used
    verbatim.

    Raises:
        ArgumentArityError: If more than one path is given
    """
    if path is None:
        return Path.ROOT
    if isinstance(path, str):
        return str(path)

    paths = list(path)
    if not paths:
        return Path.ROOT
    if len(paths) == 1:
        return str(paths[0])
    raise ArgumentArityError(f"Only a single optional path is allowed, got {len(paths)}")


def encode_key_path(key: str, path: PathArg = None) -> List[bytes]:
    """Arguments for DEL, TYPE, OBJKEYS, OBJLEN, STRLEN and ARRLEN."""
    return [_b(key), _b(resolve_path(path))]


def encode_get(key: str, paths: Sequence[str] = ()) -> List[bytes]:
    # Zero or more paths, each passed through as its own argument
    return [_b(key)] + [_b(str(p)) for p in paths]


def encode_set(
    codec: JSONCodec,
    key: str,
    value: Any,
    modifier: ExistenceModifier = ExistenceModifier.DEFAULT,
    path: PathArg = None,
) -> List[bytes]:
    args = [_b(key), _b(resolve_path(path)), _b(codec.serialize(value))]
    if modifier is not ExistenceModifier.DEFAULT:
        args.append(_b(modifier.value))
    return args


def encode_mget(keys: Sequence[str], path: str) -> List[bytes]:
    """Arguments for MGET: every key, then the single trailing path.

    Raises:
        ArgumentArityError: If no keys are given
    """
    if not keys:
        raise ArgumentArityError("MGET requires at least one key")
    return [_b(k) for k in keys] + [_b(str(path))]


def encode_number_op(key: str, path: str, number: Number) -> List[bytes]:
    """Arguments for NUMINCRBY and NUMMULTBY."""
    return [_b(key), _b(str(path)), _b(str(number))]


def encode_strappend(codec: JSONCodec, key: str, value: str, path: PathArg = None) -> List[bytes]:
    return [_b(key), _b(resolve_path(path)), _b(codec.serialize(value))]


def encode_arrappend(codec: JSONCodec, key: str, path: str, values: Sequence[Any]) -> List[bytes]:
    return [_b(key), _b(str(path))] + [_b(codec.serialize(v)) for v in values]


def encode_arrinsert(
    codec: JSONCodec, key: str, path: str, index: int, values: Sequence[Any]
) -> List[bytes]:
    args = [_b(key), _b(str(path)), _b(str(index))]
    args.extend(_b(codec.serialize(v)) for v in values)
    return args


def encode_arrindex(
    codec: JSONCodec, key: str, path: str, scalar: Any, start: int = 0, stop: int = 0
) -> List[bytes]:
    """Arguments for ARRINDEX.

    The range is sent as: both bounds when stop is non-zero, only start when
    start alone is non-zero, nothing otherwise. An explicit start=0, stop=0
    range is therefore indistinguishable from searching the whole array.
    """
    args = [_b(key), _b(str(path)), _b(codec.serialize(scalar))]
    if stop != 0:
        args.append(_b(str(start)))
        args.append(_b(str(stop)))
    elif start != 0:
        args.append(_b(str(start)))
    return args


def encode_arrpop(key: str, path: str, index: int = -1) -> List[bytes]:
    # -1 (last element) is the server default and is never sent
    args = [_b(key), _b(str(path))]
    if index != -1:
        args.append(_b(str(index)))
    return args


def encode_arrtrim(key: str, path: str, start: int, stop: int) -> List[bytes]:
    return [_b(key), _b(str(path)), _b(str(start)), _b(str(stop))]
