import json


class FakeUpstreamResponse:
    """Stand-in for a requests.Response from the LLM provider."""

    def __init__(self, status_code=200, json_body=None, text="", chunks=None):
        self.status_code = status_code
        self._json_body = json_body
        self.text = text or (json.dumps(json_body) if json_body is not None else "")
        self._chunks = chunks or []
        self.closed = False

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_body is None:
            raise ValueError("No JSON body")
        return self._json_body

    def iter_content(self, chunk_size=None):
        for chunk in self._chunks:
            yield chunk

    def close(self):
        self.closed = True


def completion(content):
    """Non-streaming chat-completions body with the given message content."""
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


def sse_event(delta):
    return "data: " + json.dumps({"choices": [{"index": 0, "delta": {"content": delta}}]}) + "\n\n"


def sse_stream(deltas, done=True):
    body = ": keep-alive\n\n" + "".join(sse_event(d) for d in deltas)
    if done:
        body += "data: [DONE]\n\n"
    return body.encode("utf-8")
