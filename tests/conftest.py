import pytest

from hbot.base import Config, MessageEvent


class FakeDispatcher:
    """Records outbound calls instead of talking to Discord."""

    def __init__(self):
        self.calls = []
        self.fail_on = set()

    async def _record(self, name, *args):
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise RuntimeError(f"{name} failed")

    async def notify(self, event, text):
        await self._record("notify", event.author_id, text)

    async def reply(self, event, text):
        await self._record("reply", event.author_id, text)

    async def react(self, event, emoji):
        await self._record("react", event.author_id, emoji)

    async def set_presence(self, text):
        await self._record("set_presence", text)

    def names(self):
        return [c[0] for c in self.calls]


def make_message(author_id="1", content="h", self_authored=False, author_name="alice"):
    return MessageEvent(
        author_id=author_id,
        author_name=author_name,
        self_authored=self_authored,
        content=content,
    )


@pytest.fixture
def dispatcher():
    return FakeDispatcher()


@pytest.fixture
def config():
    return Config()
