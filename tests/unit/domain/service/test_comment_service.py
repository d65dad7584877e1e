"""Unit tests for CommentService and the thread builder."""

from datetime import timedelta
from uuid import uuid4

import pytest

from realjobs.domain.error import ValidationError
from realjobs.domain.repository import CommentRepository
from realjobs.domain.service import CommentService, build_comment_tree, can_reply
from realjobs.domain.value import CommentId, JobId, Sentiment, UserId
from tests.conftest import NOW, make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def flatten(nodes):
    for node in nodes:
        yield node
        yield from flatten(node.replies)


class TestBuildCommentTree:
    """Tests for build_comment_tree."""

    def test_orphan_becomes_root(self):
        """A reply whose parent is missing should be shown as a root."""
        job_id = JobId(uuid4())
        orphan = make_comment(job_id, parent_id=CommentId(uuid4()))

        tree = build_comment_tree([orphan])

        assert len(tree) == 1
        assert tree[0].comment.id == orphan.id
        assert tree[0].depth == 0

    def test_parent_on_other_job_becomes_root(self):
        """A parent link that crosses jobs is ignored."""
        parent = make_comment(JobId(uuid4()))
        reply = make_comment(JobId(uuid4()), parent_id=parent.id)

        tree = build_comment_tree([parent, reply])

        assert {n.comment.id for n in tree} == {parent.id, reply.id}

    def test_cycle_members_become_roots(self):
        """Comments that point at each other should not vanish."""
        job_id = JobId(uuid4())
        a_id, b_id = CommentId(uuid4()), CommentId(uuid4())
        a = make_comment(job_id, parent_id=b_id, id=a_id)
        b = make_comment(job_id, parent_id=a_id, id=b_id)

        tree = build_comment_tree([a, b])

        assert {n.comment.id for n in flatten(tree)} == {a_id, b_id}

    def test_self_parent_becomes_root(self):
        job_id = JobId(uuid4())
        own_id = CommentId(uuid4())
        comment = make_comment(job_id, parent_id=own_id, id=own_id)

        tree = build_comment_tree([comment])

        assert [n.comment.id for n in tree] == [own_id]

    def test_depth_and_reply_permission(self):
        """Depth counts from zero; depth three no longer accepts replies."""
        job_id = JobId(uuid4())
        chain = [make_comment(job_id)]
        for _ in range(3):
            chain.append(make_comment(job_id, parent_id=chain[-1].id))

        tree = build_comment_tree(chain)

        nodes = list(flatten(tree))
        assert [n.depth for n in nodes] == [0, 1, 2, 3]
        assert [n.can_reply for n in nodes] == [True, True, True, False]

    def test_siblings_are_newest_first(self):
        """Roots and replies are ordered newest first."""
        job_id = JobId(uuid4())
        root = make_comment(job_id, created_at=NOW - timedelta(hours=5))
        older = make_comment(job_id, parent_id=root.id, created_at=NOW - timedelta(hours=2))
        newer = make_comment(job_id, parent_id=root.id, created_at=NOW - timedelta(hours=1))
        latest_root = make_comment(job_id, created_at=NOW)

        tree = build_comment_tree([root, older, newer, latest_root])

        assert [n.comment.id for n in tree] == [latest_root.id, root.id]
        assert [n.comment.id for n in tree[1].replies] == [newer.id, older.id]

    def test_deep_chain_does_not_recurse(self):
        """Very deep threads should build without hitting the recursion limit."""
        job_id = JobId(uuid4())
        chain = [make_comment(job_id)]
        for _ in range(1500):
            chain.append(make_comment(job_id, parent_id=chain[-1].id))

        tree = build_comment_tree(chain)

        assert len(tree) == 1

    def test_can_reply(self):
        """Replies are accepted at depths 0 to 2 (depth < max_reply_depth).

        This follows the job board's comment component, which offers a
        reply button only while depth < maxDepth, rather than the looser
        reading "depth 0..3 may be replied to".
        """
        assert can_reply(2)
        assert not can_reply(3)
        assert can_reply(4, max_reply_depth=5)


class TestCreateComment:
    """Tests for CommentService.create_comment."""

    @pytest.mark.asyncio
    async def test_creates_root_comment(self, unit_env):
        """Content should be stripped and stored with its sentiment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        job_id = JobId(uuid4())

        # Act
        comment = await comment_service.create_comment(
            job_id, UserId(uuid4()), "  Got an interview!  ", Sentiment.POSITIVE
        )

        # Assert
        assert comment.content == "Got an interview!"
        assert comment.parent_id is None
        assert comment.sentiment == Sentiment.POSITIVE

    @pytest.mark.asyncio
    async def test_invalid_parent_is_dropped(self, unit_env):
        """A parent that doesn't exist should turn the reply into a root."""
        # Arrange
        comment_service = await unit_env.get(CommentService)

        # Act
        comment = await comment_service.create_comment(
            JobId(uuid4()),
            UserId(uuid4()),
            "Replying to nothing",
            Sentiment.NEUTRAL,
            parent_id=CommentId(uuid4()),
        )

        # Assert
        assert comment.parent_id is None

    @pytest.mark.asyncio
    async def test_parent_from_other_job_is_dropped(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        other = await comment_repo.save(make_comment(JobId(uuid4())))

        # Act
        comment = await comment_service.create_comment(
            JobId(uuid4()),
            UserId(uuid4()),
            "Wrong thread",
            Sentiment.NEUTRAL,
            parent_id=other.id,
        )

        # Assert
        assert comment.parent_id is None

    @pytest.mark.asyncio
    async def test_reply_to_depth_three_is_rejected(self, unit_env):
        """Replies to a comment at the maximum depth should be refused."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        job_id = JobId(uuid4())
        parent = await comment_repo.save(make_comment(job_id))
        for _ in range(3):
            parent = await comment_repo.save(make_comment(job_id, parent_id=parent.id))

        # Act & Assert
        with pytest.raises(ValidationError, match="depth"):
            await comment_service.create_comment(
                job_id, UserId(uuid4()), "Too deep", Sentiment.NEUTRAL, parent.id
            )

    @pytest.mark.asyncio
    async def test_reply_to_depth_two_is_accepted(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        job_id = JobId(uuid4())
        parent = await comment_repo.save(make_comment(job_id))
        for _ in range(2):
            parent = await comment_repo.save(make_comment(job_id, parent_id=parent.id))

        # Act
        reply = await comment_service.create_comment(
            job_id, UserId(uuid4()), "Just deep enough", Sentiment.NEUTRAL, parent.id
        )

        # Assert
        assert reply.parent_id == parent.id
        thread = await comment_service.get_comment_thread(job_id)
        assert max(n.depth for n in flatten(thread)) == 3

    @pytest.mark.parametrize("content", ["", "   ", "x" * 501])
    def test_validate_content_rejects(self, content):
        """Empty and overlong comments are invalid."""
        from realjobs.config import CommentSettings
        from realjobs.persistence.repository.inmemory import InMemoryCommentRepository

        service = CommentService(InMemoryCommentRepository(), CommentSettings())

        with pytest.raises(ValidationError):
            service.validate_content(content)
