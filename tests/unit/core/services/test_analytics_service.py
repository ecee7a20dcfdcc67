"""Tests for AnalyticsService."""

from datetime import date, datetime, timedelta, timezone

import pytest

from linkhub.core.exceptions import ForbiddenError
from linkhub.core.services import AnalyticsService, PostService, UserService
from linkhub.core.services.analytics_service import _average, _day_series


def test_day_series_ends_today():
    assert _day_series(3, date(2024, 3, 1)) == ["2024-02-28", "2024-02-29", "2024-03-01"]


def test_average_handles_zero():
    assert _average(5, 0) == 0.0
    assert _average(2, 3) == 0.67


async def test_dashboard_forbidden_for_members(test_session, test_user):
    with pytest.raises(ForbiddenError) as exc:
        await AnalyticsService(test_session).get_dashboard(test_user.id)
    assert exc.value.message == "Admin access required"


async def test_dashboard_numbers(test_session, admin_user, test_user, other_user, make_user):
    await make_user(name="Inactive", is_active=False)
    await make_user(name="Recent", last_active=datetime.now(timezone.utc))
    posts = PostService(test_session)
    post = await posts.create_post(test_user.id, "hello")
    await posts.create_post(test_user.id, "hidden", is_public=False)
    await posts.toggle_like(other_user.id, post.id)
    await posts.add_comment(other_user.id, post.id, "hi")

    dash = await AnalyticsService(test_session).get_dashboard(admin_user.id)

    assert dash.overview.total_users == 4
    assert dash.overview.total_posts == 1
    assert dash.overview.active_users == 1
    assert dash.engagement.total_likes == 1
    assert dash.engagement.total_comments == 1
    assert dash.engagement.avg_likes == 0.5
    assert sum(day.users for day in dash.user_growth) == 4


async def test_personal_analytics(test_session, test_user, other_user):
    posts = PostService(test_session)
    quiet = await posts.create_post(test_user.id, "quiet")
    popular = await posts.create_post(test_user.id, "popular")
    await posts.toggle_like(other_user.id, popular.id)
    await posts.share_post(other_user.id, popular.id)
    await UserService(test_session).get_profile(test_user.id, viewer_id=other_user.id)

    res = await AnalyticsService(test_session).get_personal(test_user.id)

    assert [p.id for p in res.top_posts] == [popular.id, quiet.id]
    assert res.summary.total_posts == 2
    assert res.summary.total_likes == 1
    assert res.summary.total_shares == 1
    assert res.summary.profile_views == 1
    assert res.engagement_over_time[0].total_engagement == 2

    today = datetime.now(timezone.utc).date()
    assert len(res.profile_views) == 7
    assert res.profile_views[-1].date == today.isoformat()
    assert res.profile_views[-1].views == 1
    assert res.profile_views[0].date == (today - timedelta(days=6)).isoformat()
    assert all(day.views == 0 for day in res.profile_views[:-1])
