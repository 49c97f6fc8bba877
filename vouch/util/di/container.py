"""Container assembly for the API process."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from vouch.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container wired with the production side of every provider.

    Postgres persistence, the mail API, the websocket gateway and the
    reputation API are all real here; tests build their own container from
    the same provider list with mocks swapped in.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app``.

    The container is also reachable as ``app.state.dishka_container``, which
    the notification socket uses to resolve its gateway.
    """
    setup_dishka(container, app)
