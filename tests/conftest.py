from collections.abc import Callable
from typing import Any

import pytest
from botcmd.core.config.app_config import BotCommandConfig
from botcmd.core.domain.dispatch_context import DispatchContext
from botcmd.core.domain.references import ChannelRef, ServerRef, UserRef
from botcmd.core.interfaces.directory_interface import IChatPlatform
from botcmd.core.services.dispatcher import Dispatcher


class FakeChatPlatform(IChatPlatform):
    """In-memory platform: records sends, queues tasks until run_tasks()."""

    def __init__(self) -> None:
        self.users: dict[str, UserRef] = {}
        self.channels: dict[str, ChannelRef] = {}
        self.capabilities: dict[str, set[str]] = {}
        self.automated: set[str] = set()
        self.bot_owner_ids: set[str] = set()
        self.server_owner: UserRef | None = None
        self.sent: list[tuple[ChannelRef, str]] = []
        self.tasks: list[Callable[[], Any]] = []

    def add_user(self, user_id: str, name: str) -> UserRef:
        user = UserRef(id=user_id, name=name)
        self.users[user_id] = user
        return user

    def add_channel(self, channel_id: str, name: str) -> ChannelRef:
        channel = ChannelRef(id=channel_id, name=name)
        self.channels[channel_id] = channel
        return channel

    def resolve_user_by_id(self, server: ServerRef, user_id: str) -> UserRef | None:
        return self.users.get(user_id)

    def resolve_users_by_name(self, server: ServerRef, name: str) -> list[UserRef]:
        return [u for u in self.users.values() if u.name.lower() == name.lower()]

    def resolve_channel_by_id(
        self, server: ServerRef, channel_id: str
    ) -> ChannelRef | None:
        return self.channels.get(channel_id)

    def external_capabilities_of(self, server: ServerRef, user: UserRef) -> set[str]:
        return self.capabilities.get(user.id, set())

    def is_automated_sender(self, user: UserRef) -> bool:
        return user.id in self.automated

    def is_bot_owner(self, user: UserRef) -> bool:
        return user.id in self.bot_owner_ids

    def owner_of(self, server: ServerRef) -> UserRef:
        assert self.server_owner is not None
        return self.server_owner

    def send_message(self, channel: ChannelRef, content: str) -> Any:
        self.sent.append((channel, content))
        return None

    def submit_background_task(self, task: Callable[[], Any]) -> None:
        self.tasks.append(task)

    def run_tasks(self) -> None:
        tasks, self.tasks = self.tasks, []
        for task in tasks:
            task()

    @property
    def sent_texts(self) -> list[str]:
        return [content for _, content in self.sent]


@pytest.fixture
def platform() -> FakeChatPlatform:
    return FakeChatPlatform()


@pytest.fixture
def server() -> ServerRef:
    return ServerRef(id="1000", name="test-server")


@pytest.fixture
def channel(platform: FakeChatPlatform) -> ChannelRef:
    return platform.add_channel("500", "general")


@pytest.fixture
def invoker(platform: FakeChatPlatform) -> UserRef:
    return platform.add_user("42", "Alice")


@pytest.fixture
def make_dispatcher(
    platform: FakeChatPlatform,
) -> Callable[..., Dispatcher]:
    """Build a started dispatcher over the fake platform."""

    def factory(
        *,
        bit_supplier: Callable[[ServerRef, UserRef], int] | None = None,
        macros: dict[str, str] | None = None,
        config: BotCommandConfig | None = None,
    ) -> Dispatcher:
        resolver = None
        if macros is not None:
            resolver = lambda _server, name: macros.get(name)  # noqa: E731
        context = DispatchContext(
            platform=platform,
            config=config or BotCommandConfig(),
            permission_bit_supplier=bit_supplier,
            macro_resolver=resolver,
        )
        dispatcher = Dispatcher(context)
        dispatcher.start()
        return dispatcher

    return factory
