"""Public JSON types and the value codec.

The codec turns caller values into JSON text for the wire and JSON text
replies back into values. Callers that store their own types supply an
encoder/decoder pair; by default plain JSON values pass through untouched.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from rejson_commands._internal.json_helpers import JSON_TYPE_NAMES, dumps_compact, loads_text

# Represents any valid JSON value
JSONValue = Union[
    None,
    bool,
    int,
    float,
    str,
    List["JSONValue"],
    Dict[str, "JSONValue"],
]

# Decoder that transforms a parsed JSONValue into the caller's type
ValueDecoder = Callable[[JSONValue], Any]

# Encoder that transforms the caller's type into a JSONValue
ValueEncoder = Callable[[Any], JSONValue]


def identity_decoder(value: JSONValue) -> Any:
    """Return the JSONValue as-is."""
    return value


def identity_encoder(value: Any) -> JSONValue:
    """Return the value as-is; it must already be JSON-serializable."""
    return value  # type: ignore[no-any-return]


class JSONCodec:
    """Serializes values to JSON text and back.

    Stateless apart from the two hooks, so one instance can be shared by
    clients on different connections.
    """

    def __init__(
        self,
        encoder: Optional[ValueEncoder] = None,
        decoder: Optional[ValueDecoder] = None,
    ) -> None:
        self._encoder = encoder or identity_encoder
        self._decoder = decoder or identity_decoder

    def serialize(self, value: Any) -> str:
        """Encode a value as compact JSON text.

        Raises:
            TypeError: If the encoded value is not JSON-serializable
        """
        return dumps_compact(self._encoder(value))

    def deserialize(self, text: Optional[str]) -> Any:
        """Decode JSON text into a value; a missing reply decodes to None.

        Raises:
            json.JSONDecodeError: If the text is not valid JSON
        """
        if text is None:
            return None
        return self._decoder(loads_text(text))

    def type_for_name(self, name: str) -> Optional[type]:
        """Map a JSON type name to the native type.

        Returns None for "null".

        Raises:
            KeyError: If the name is not a JSON type name
        """
        return JSON_TYPE_NAMES[name]
