"""Unit tests for ListCommentTreesUseCase."""

import pytest

from commenttree.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    ListCommentTreesRequest,
    ListCommentTreesUseCase,
)
from commenttree.domain.value import SortField, SortOrder
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListCommentTreesRequest:
    """Tests for sort option parsing."""

    def test_defaults(self):
        request = ListCommentTreesRequest()

        assert request.page == 1
        assert request.limit is None
        assert request.sort_by == SortField.CREATED_AT
        assert request.sort_order == SortOrder.ASC

    def test_known_values_are_case_insensitive(self):
        request = ListCommentTreesRequest(sort_by="ID", sort_order="Desc")

        assert request.sort_by == SortField.ID
        assert request.sort_order == SortOrder.DESC

    def test_unknown_values_fall_back(self):
        """Unsupported sort options never fail the request."""
        request = ListCommentTreesRequest(sort_by="points", sort_order="sideways")

        assert request.sort_by == SortField.CREATED_AT
        assert request.sort_order == SortOrder.ASC


class TestListCommentTreesUseCase:
    """Tests for ListCommentTreesUseCase."""

    @pytest.mark.asyncio
    async def test_page_of_trees(self, unit_env):
        """Each top-level comment is returned with its replies."""
        create = await unit_env.get(CreateCommentUseCase)
        list_trees = await unit_env.get(ListCommentTreesUseCase)
        first = await create.execute(CreateCommentRequest(text="First"))
        await create.execute(CreateCommentRequest(text="Reply", parent_id=first.id))
        await create.execute(CreateCommentRequest(text="Second"))

        response = await list_trees.execute(ListCommentTreesRequest(limit=1))

        assert response.total == 2
        assert response.limit == 1
        assert [tree.comment for tree in response.comments] == ["First"]
        assert response.comments[0].children[0].comment == "Reply"
        assert response.skipped == []

    @pytest.mark.asyncio
    async def test_page_past_end_is_empty(self, unit_env):
        create = await unit_env.get(CreateCommentUseCase)
        list_trees = await unit_env.get(ListCommentTreesUseCase)
        await create.execute(CreateCommentRequest(text="Only"))

        response = await list_trees.execute(ListCommentTreesRequest(page=4))

        assert response.comments == []
        assert response.total == 1
