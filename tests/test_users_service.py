import asyncio

from conftest import AlwaysFail

from client.presentation import ErrorView, LoadingView, UserListView, present
from core.constants import CONNECTION_ERROR_MESSAGE, INTENTIONAL_ERROR_MESSAGE
from core.models.network import OperationState


class Recorder:
    """Listener that re-derives the view on every change, like the scene does."""

    def __init__(self, service) -> None:
        self.states: list[OperationState] = []
        self.view = None
        service.register_change_callback(self)

    def __call__(self, snapshot) -> None:
        self.states.append(snapshot.state)
        self.view = present(snapshot)


def test_snapshot_before_initialize_is_not_started(make_app):
    app = make_app()

    assert app.users_service.snapshot.state is OperationState.NOT_STARTED
    assert not app.users_service.is_loading


def test_initialize_then_success(make_app):
    app = make_app()
    service = app.users_service

    async def scenario():
        recorder = Recorder(service)
        operation = service.initialize()
        assert isinstance(recorder.view, LoadingView)
        assert service.is_loading
        await operation.wait()
        await app.api_client.aclose()
        return recorder

    recorder = asyncio.run(scenario())

    assert recorder.states == [OperationState.PENDING, OperationState.SUCCEEDED]
    assert isinstance(recorder.view, UserListView)
    assert recorder.view.header == "4 usuarios cargados"
    assert len(recorder.view.rows) == 4


def test_initialize_runs_once(make_app):
    app = make_app()
    service = app.users_service

    async def scenario():
        first = service.initialize()
        second = service.initialize()
        await first.wait()
        await app.api_client.aclose()
        return first, second

    first, second = asyncio.run(scenario())

    assert first is second


def test_initialize_with_connection_failure(make_app):
    app = make_app(rng=AlwaysFail())
    service = app.users_service

    async def scenario():
        recorder = Recorder(service)
        await service.initialize().wait()
        await app.api_client.aclose()
        return recorder

    recorder = asyncio.run(scenario())

    assert isinstance(recorder.view, ErrorView)
    assert recorder.view.message == CONNECTION_ERROR_MESSAGE


def test_simulate_error(make_app):
    app = make_app()
    service = app.users_service

    async def scenario():
        recorder = Recorder(service)
        operation = service.simulate_error()
        assert recorder.states == [OperationState.PENDING]
        await operation.wait()
        await app.api_client.aclose()
        return recorder

    recorder = asyncio.run(scenario())

    assert recorder.states == [OperationState.PENDING, OperationState.FAILED]
    assert isinstance(recorder.view, ErrorView)
    assert recorder.view.message == INTENTIONAL_ERROR_MESSAGE
    assert recorder.view.retry_action == "reload"


def test_retry_after_error_loads_users(make_app):
    app = make_app()
    service = app.users_service

    async def scenario():
        recorder = Recorder(service)
        await service.simulate_error().wait()
        await service.reload().wait()
        await app.api_client.aclose()
        return recorder

    recorder = asyncio.run(scenario())

    assert recorder.states == [
        OperationState.PENDING,
        OperationState.FAILED,
        OperationState.PENDING,
        OperationState.SUCCEEDED,
    ]
    assert isinstance(recorder.view, UserListView)


def test_stale_settlement_arriving_later_is_ignored(make_app):
    app = make_app(delay_unit=0.05)
    service = app.users_service

    async def scenario():
        recorder = Recorder(service)
        stale = service.reload()  # 3 unidades
        current = service.simulate_error()  # 2 unidades
        await current.wait()
        view_after_current = recorder.view
        await stale.wait()
        await asyncio.sleep(0)
        await app.api_client.aclose()
        return recorder, view_after_current, stale, current

    recorder, view_after_current, stale, current = asyncio.run(scenario())

    assert stale.state is OperationState.SUCCEEDED
    assert service.current is current
    assert isinstance(view_after_current, ErrorView)
    assert isinstance(recorder.view, ErrorView)
    assert OperationState.SUCCEEDED not in recorder.states


def test_stale_settlement_arriving_first_is_ignored(make_app):
    app = make_app(delay_unit=0.05)
    service = app.users_service

    async def scenario():
        recorder = Recorder(service)
        stale = service.simulate_error()  # 2 unidades
        current = service.reload()  # 3 unidades
        await stale.wait()
        await asyncio.sleep(0)
        view_after_stale = recorder.view
        await current.wait()
        await app.api_client.aclose()
        return recorder, view_after_stale

    recorder, view_after_stale = asyncio.run(scenario())

    assert isinstance(view_after_stale, LoadingView)
    assert isinstance(recorder.view, UserListView)
    assert OperationState.FAILED not in recorder.states


def test_replacing_does_not_cancel_the_previous_operation(make_app):
    app = make_app()
    service = app.users_service

    async def scenario():
        first = service.reload()
        service.reload()
        snapshot = await first.wait()
        await app.api_client.aclose()
        return snapshot

    assert asyncio.run(scenario()).state is OperationState.SUCCEEDED


def test_failing_listener_does_not_block_others(make_app):
    app = make_app()
    service = app.users_service

    def broken(snapshot):
        raise RuntimeError("listener bug")

    async def scenario():
        service.register_change_callback(broken)
        recorder = Recorder(service)
        await service.reload().wait()
        await app.api_client.aclose()
        return recorder

    recorder = asyncio.run(scenario())

    assert recorder.states == [OperationState.PENDING, OperationState.SUCCEEDED]


def test_unregistered_listener_stops_receiving(make_app):
    app = make_app()
    service = app.users_service

    async def scenario():
        recorder = Recorder(service)
        service.unregister_change_callback(recorder)
        await service.reload().wait()
        await app.api_client.aclose()
        return recorder

    assert asyncio.run(scenario()).states == []
