"""Tests for PostService using the in-memory database."""

import pytest
from sqlalchemy import func, select

from linkhub.core.exceptions import NotFoundError, ValidationError
from linkhub.core.models import Notification, NotificationType, Post
from linkhub.core.services import PostService


async def _count(session, model):
    return await session.scalar(select(func.count()).select_from(model))


async def test_create_post_trims_content(test_session, test_user):
    post = await PostService(test_session).create_post(test_user.id, "  Hello world  ")
    assert post.content == "Hello world"
    assert post.author.name == "Alice Example"
    assert post.like_count == 0


@pytest.mark.parametrize("content", ["", "   ", "\n\t"])
async def test_blank_post_rejected_and_not_persisted(test_session, test_user, content):
    with pytest.raises(ValidationError):
        await PostService(test_session).create_post(test_user.id, content)
    assert await _count(test_session, Post) == 0


async def test_overlong_post_rejected(test_session, test_user):
    with pytest.raises(ValidationError):
        await PostService(test_session).create_post(test_user.id, "x" * 3001)
    assert await _count(test_session, Post) == 0


async def test_list_posts_newest_first(test_session, test_user, other_user):
    svc = PostService(test_session)
    await svc.create_post(test_user.id, "one")
    await svc.create_post(other_user.id, "two")
    await svc.create_post(test_user.id, "three")

    assert [p.content for p in await svc.list_posts()] == ["three", "two", "one"]
    assert [p.content for p in await svc.list_user_posts(test_user.id)] == ["three", "one"]


async def test_like_toggles_and_notifies_author(test_session, test_user, other_user):
    svc = PostService(test_session)
    post = await svc.create_post(test_user.id, "like me")

    first = await svc.toggle_like(other_user.id, post.id)
    assert first.liked is True
    assert first.like_count == 1

    second = await svc.toggle_like(other_user.id, post.id)
    assert second.liked is False
    assert second.like_count == 0

    notes = (await test_session.execute(select(Notification))).scalars().all()
    assert len(notes) == 1
    assert notes[0].recipient_id == test_user.id
    assert notes[0].type == NotificationType.LIKE.value
    assert notes[0].related_post_id == post.id
    assert notes[0].message == "Bob Example liked your post"


async def test_self_like_and_comment_do_not_notify(test_session, test_user):
    svc = PostService(test_session)
    post = await svc.create_post(test_user.id, "my own post")

    await svc.toggle_like(test_user.id, post.id)
    await svc.add_comment(test_user.id, post.id, "talking to myself")

    assert await _count(test_session, Notification) == 0


async def test_comment_notifies_author(test_session, test_user, other_user):
    svc = PostService(test_session)
    post = await svc.create_post(test_user.id, "thoughts?")

    comment = await svc.add_comment(other_user.id, post.id, "  Agreed  ")
    assert comment.text == "Agreed"
    assert comment.author.id == other_user.id

    note = (await test_session.execute(select(Notification))).scalar_one()
    assert note.type == NotificationType.COMMENT.value
    assert note.recipient_id == test_user.id


async def test_blank_comment_rejected(test_session, test_user):
    svc = PostService(test_session)
    post = await svc.create_post(test_user.id, "thoughts?")
    with pytest.raises(ValidationError):
        await svc.add_comment(test_user.id, post.id, "   ")


async def test_share_once_without_notification(test_session, test_user, other_user):
    svc = PostService(test_session)
    post = await svc.create_post(test_user.id, "share me")

    first = await svc.share_post(other_user.id, post.id)
    again = await svc.share_post(other_user.id, post.id)
    assert (first.shared, first.share_count) == (True, 1)
    assert (again.shared, again.share_count) == (False, 1)
    assert await _count(test_session, Notification) == 0


async def test_missing_post(test_session, test_user):
    svc = PostService(test_session)
    with pytest.raises(NotFoundError):
        await svc.toggle_like(test_user.id, 999)
    with pytest.raises(NotFoundError):
        await svc.add_comment(test_user.id, 999, "hello")
    with pytest.raises(NotFoundError):
        await svc.share_post(test_user.id, 999)
