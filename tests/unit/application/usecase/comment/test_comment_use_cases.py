"""Unit tests for the comment use cases."""

import pytest

from commenttree.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentTreeRequest,
    DeleteCommentTreeUseCase,
    GetCommentTreeRequest,
    GetCommentTreeUseCase,
    SearchCommentsRequest,
    SearchCommentsUseCase,
)
from commenttree.domain.error import NotFoundError, ParentNotFoundError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_wire_fields(self, unit_env):
        """The response exposes text as ``comment`` and hides the path."""
        use_case = await unit_env.get(CreateCommentUseCase)

        response = await use_case.execute(CreateCommentRequest(text="Hi"))

        data = response.model_dump()
        assert data["comment"] == "Hi"
        assert data["parent_id"] is None
        assert "path" not in data
        assert isinstance(data["path_id"], str)

    @pytest.mark.asyncio
    async def test_unknown_parent(self, unit_env):
        """Replies to a missing parent are rejected."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ParentNotFoundError):
            await use_case.execute(CreateCommentRequest(text="Hi", parent_id=5))


class TestGetCommentTreeUseCase:
    """Tests for GetCommentTreeUseCase."""

    @pytest.mark.asyncio
    async def test_nested_children(self, unit_env):
        """Children are serialized recursively."""
        create = await unit_env.get(CreateCommentUseCase)
        get_tree = await unit_env.get(GetCommentTreeUseCase)
        root = await create.execute(CreateCommentRequest(text="Root"))
        reply = await create.execute(
            CreateCommentRequest(text="Reply", parent_id=root.id)
        )

        response = await get_tree.execute(GetCommentTreeRequest(comment_id=root.id))

        tree = response.comments
        assert tree.id == root.id
        assert [child.id for child in tree.children] == [reply.id]
        assert tree.children[0].comment == "Reply"
        assert tree.children[0].children == []


class TestDeleteCommentTreeUseCase:
    """Tests for DeleteCommentTreeUseCase."""

    @pytest.mark.asyncio
    async def test_reports_removed_count(self, unit_env):
        """The response echoes the id and counts removed comments."""
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentTreeUseCase)
        root = await create.execute(CreateCommentRequest(text="Root"))
        await create.execute(CreateCommentRequest(text="Reply", parent_id=root.id))

        response = await delete.execute(DeleteCommentTreeRequest(comment_id=root.id))

        assert response.id == root.id
        assert response.removed == 2

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        delete = await unit_env.get(DeleteCommentTreeUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(DeleteCommentTreeRequest(comment_id=3))


class TestSearchCommentsUseCase:
    """Tests for SearchCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_flat_results(self, unit_env):
        """Search results carry no children."""
        create = await unit_env.get(CreateCommentUseCase)
        search = await unit_env.get(SearchCommentsUseCase)
        root = await create.execute(CreateCommentRequest(text="Needle here"))
        await create.execute(CreateCommentRequest(text="needle too", parent_id=root.id))

        response = await search.execute(SearchCommentsRequest(query="NEEDLE"))

        assert len(response.comments) == 2
        assert all("children" not in c.model_dump() for c in response.comments)
