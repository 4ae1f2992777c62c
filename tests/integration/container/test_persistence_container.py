"""Integration tests: use cases against real persistence through the container."""

import pytest
from sqlalchemy import Engine

from paws.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetThreadRequest,
    GetThreadUseCase,
)
from paws.application.usecase.context import OpenContextRequest, OpenContextUseCase
from paws.domain.repository import CommentRepository
from paws.domain.value import ContextType
from paws.persistence.repository import SqlCommentRepository
from paws.persistence.tables import metadata
from paws.util.di.container import create_container
from tests.conftest import make_actor
from tests.di import build_test_container

OWNER = make_actor("owner")
ALICE = make_actor("alice")


@pytest.fixture
def container(monkeypatch, tmp_path):
    """Production container on a scratch SQLite file."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DATABASE__URL", f"sqlite:///{tmp_path / 'paws.db'}")
    app_container = build_test_container(unmock={"persistence"})
    metadata.create_all(app_container.get(Engine))
    yield app_container
    app_container.close()


def create(request_container, content):
    return request_container.get(CreateCommentUseCase).execute(
        CreateCommentRequest(
            context_type=ContextType.PHOTO,
            context_id="fluffy",
            actor=ALICE,
            content=content,
        )
    )


def test_writes_are_committed_per_request(container):
    with container() as request_container:
        request_container.get(OpenContextUseCase).execute(
            OpenContextRequest(
                context_type=ContextType.PHOTO, context_id="fluffy", owner_id="owner"
            )
        )
        created = create(request_container, "What a floof")

    with container() as request_container:
        response = request_container.get(GetThreadUseCase).execute(
            GetThreadRequest(
                context_type=ContextType.PHOTO, context_id="fluffy", actor=OWNER
            )
        )

    assert [item.comment_id for item in response.comments] == [
        created.comment.comment_id
    ]
    assert response.comments[0].content == "What a floof"



def test_production_container_uses_sql_repositories(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE__URL", f"sqlite:///{tmp_path / 'prod.db'}")
    app_container = create_container()

    with app_container() as request_container:
        repository = request_container.get(CommentRepository)

    app_container.close()
    assert isinstance(repository, SqlCommentRepository)
