"""Unit tests for GetCommentsUseCase."""

from uuid import UUID, uuid4

import pytest

from realjobs.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from realjobs.application.usecase.comment.get_comments import CommentNodeResponse
from realjobs.domain.repository import CommentRepository
from realjobs.domain.service import CommentNode, VoteService
from realjobs.domain.value import CommentId, CommentVoteType, JobId, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_thread_with_counts_and_user_votes(self, unit_env):
        """Replies nest under their parent with reaction counts attached."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        vote_service = await unit_env.get(VoteService)
        job_id = JobId(uuid4())
        root = await comment_repo.save(make_comment(job_id))
        reply = await comment_repo.save(make_comment(job_id, parent_id=root.id))
        user_id = str(uuid4())
        await vote_service.cast_comment_vote(
            UserId(UUID(user_id)), reply.id, CommentVoteType.HELPFUL
        )

        # Act
        response = await use_case.execute(
            GetCommentsRequest(job_id=str(job_id), user_id=user_id)
        )

        # Assert
        assert response.total == 2
        [root_node] = response.comments
        assert root_node.comment_id == str(root.id)
        assert root_node.net_count == 0
        assert root_node.user_vote is None
        [reply_node] = root_node.replies
        assert reply_node.depth == 1
        assert reply_node.net_count == 1
        assert reply_node.user_vote == CommentVoteType.HELPFUL

    @pytest.mark.asyncio
    async def test_anonymous_request_has_no_user_votes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        job_id = JobId(uuid4())
        await comment_repo.save(make_comment(job_id))

        # Act
        response = await use_case.execute(GetCommentsRequest(job_id=str(job_id)))

        # Assert
        assert [c.user_vote for c in response.comments] == [None]

    @pytest.mark.asyncio
    async def test_job_without_comments(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(job_id=str(uuid4())))

        assert response.comments == []
        assert response.total == 0

    @pytest.mark.asyncio
    async def test_orphan_reply_is_served_as_root(self, unit_env):
        """The response follows the comment thread, orphans included."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        job_id = JobId(uuid4())
        orphan = await comment_repo.save(
            make_comment(job_id, parent_id=CommentId(uuid4()))
        )

        # Act
        response = await use_case.execute(GetCommentsRequest(job_id=str(job_id)))

        # Assert
        [node] = response.comments
        assert node.comment_id == str(orphan.id)
        assert node.depth == 0
        assert response.total == 1


class TestCommentNodeResponse:
    """Tests for CommentNodeResponse.from_domain."""

    def test_long_reply_chain_converts(self):
        """A chain longer than the recursion limit still converts."""
        # Arrange
        job_id = JobId(uuid4())
        root = CommentNode(comment=make_comment(job_id), depth=0, can_reply=True)
        node = root
        for depth in range(1, 1500):
            reply = CommentNode(
                comment=make_comment(job_id, parent_id=node.comment.id),
                depth=depth,
                can_reply=False,
            )
            node.replies.append(reply)
            node = reply

        # Act
        response = CommentNodeResponse.from_domain(root, {}, {})

        # Assert
        depths = []
        current = response
        while True:
            depths.append(current.depth)
            if not current.replies:
                break
            [current] = current.replies
        assert depths == list(range(1500))
        assert current.comment_id == str(node.comment.id)
        assert current.parent_id == str(node.comment.parent_id)
