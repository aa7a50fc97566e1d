"""
Incremental parser for OpenAI-style chat-completion event streams.

The mentor chat endpoint relays the upstream bytes untouched, so the consumer
has to reassemble the reply: split on newlines, keep only ``data: `` lines,
stop at ``[DONE]`` and concatenate ``choices[0].delta.content`` fragments.
Network chunks can end anywhere, including inside a UTF-8 sequence or a JSON
payload.
"""
import codecs
import json
import logging
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


class ChatStreamParser:
    def __init__(self):
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self._parts: List[str] = []
        self.done = False

    @property
    def content(self) -> str:
        """Reply text assembled so far."""
        return "".join(self._parts)

    def feed(self, chunk: bytes) -> List[str]:
        """Consume one network chunk; return the deltas it completed."""
        if self.done:
            return []
        self._buffer += self._decoder.decode(chunk)
        return self._drain(final=False)

    def finish(self) -> List[str]:
        """Flush the decoder and whatever is left in the buffer at end-of-stream."""
        if self.done:
            return []
        self._buffer += self._decoder.decode(b"", final=True)
        if self._buffer and not self._buffer.endswith("\n"):
            self._buffer += "\n"
        deltas = self._drain(final=True)
        self._buffer = ""
        self.done = True
        return deltas

    def _drain(self, final: bool) -> List[str]:
        deltas: List[str] = []
        while True:
            newline_index = self._buffer.find("\n")
            if newline_index == -1:
                break
            line = self._buffer[:newline_index]
            self._buffer = self._buffer[newline_index + 1:]

            if line.endswith("\r"):
                line = line[:-1]
            if line.startswith(":") or line.strip() == "":
                continue
            if not line.startswith(DATA_PREFIX):
                continue

            payload = line[len(DATA_PREFIX):].strip()
            if payload == DONE_SENTINEL:
                self.done = True
                self._buffer = ""
                break

            try:
                event = json.loads(payload)
            except json.JSONDecodeError:
                if final:
                    logger.warning("Dropping unparseable stream line", extra={"line": line[:500]})
                    continue
                # Incomplete payload: put it back and wait for more bytes
                self._buffer = line + "\n" + self._buffer
                break

            delta = _delta_content(event)
            if delta:
                self._parts.append(delta)
                deltas.append(delta)
        return deltas


def _delta_content(event) -> str:
    try:
        content = event["choices"][0]["delta"].get("content")
    except (KeyError, IndexError, TypeError, AttributeError):
        return ""
    return content if isinstance(content, str) else ""


def iter_deltas(chunks: Iterable[bytes]) -> Iterator[str]:
    """Yield text deltas from an iterable of raw stream chunks."""
    parser = ChatStreamParser()
    for chunk in chunks:
        yield from parser.feed(chunk)
        if parser.done:
            return
    yield from parser.finish()
