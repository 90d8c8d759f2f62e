"""Internal type definitions not exposed in public API."""

from typing import Dict, Sequence, Union

from rejson_commands.types import Command, ReplyKind

# Optional single path argument: None, one path, or a sequence of paths
# (a sequence longer than one is rejected by the encoder)
PathArg = Union[None, str, Sequence[str]]

# Number accepted by NUMINCRBY / NUMMULTBY
Number = Union[int, float]

# Reply shape each command reads back from the transport
REPLY_KINDS: Dict[Command, ReplyKind] = {
    Command.DEL: ReplyKind.INTEGER,
    Command.GET: ReplyKind.BULK,
    Command.SET: ReplyKind.STATUS,
    Command.TYPE: ReplyKind.BULK,
    Command.MGET: ReplyKind.MULTI_BULK,
    Command.NUMINCRBY: ReplyKind.BULK,
    Command.NUMMULTBY: ReplyKind.BULK,
    Command.OBJKEYS: ReplyKind.MULTI_BULK,
    Command.OBJLEN: ReplyKind.INTEGER,
    Command.STRAPPEND: ReplyKind.INTEGER,
    Command.STRLEN: ReplyKind.INTEGER,
    Command.ARRAPPEND: ReplyKind.INTEGER,
    Command.ARRINDEX: ReplyKind.INTEGER,
    Command.ARRINSERT: ReplyKind.INTEGER,
    Command.ARRLEN: ReplyKind.INTEGER,
    Command.ARRPOP: ReplyKind.BULK,
    Command.ARRTRIM: ReplyKind.INTEGER,
}


def reply_kind_for(command: Command) -> ReplyKind:
    """Return the reply shape the given command produces."""
    return REPLY_KINDS[command]
