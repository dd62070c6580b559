from datetime import UTC, datetime, timedelta

from voidfeed.domain import Comment, Post, SessionClaims

NOW = datetime(2026, 1, 1, tzinfo=UTC)


def test_post_toggle_like_flips_membership() -> None:
    post = Post(id="p", author_id="u1", author_name="ali", created_at=NOW, content="hi")

    assert post.toggle_like("u1") == 1
    assert list(post.likes) == ["u1"]
    assert post.toggle_like("u1") == 0
    assert "u1" not in post.likes
    assert post.like_count == 0


def test_post_snapshot_is_detached() -> None:
    post = Post(id="p", author_id="u1", author_name="ali", created_at=NOW, image="img")
    post.toggle_like("u1")
    snap = post.snapshot()

    post.toggle_like("u2")
    post.add_comment(Comment("c1", "u2", "sam", "hey", NOW))

    assert list(snap.likes) == ["u1"]
    assert snap.comments == []
    assert snap.image == "img"


def test_session_claims_expiry_boundary() -> None:
    claims = SessionClaims(
        user_id="u1",
        username="ali",
        issued_at=NOW,
        expires_at=NOW + timedelta(days=7),
    )

    assert claims.is_expired(NOW + timedelta(days=7)) is False
    assert claims.is_expired(NOW + timedelta(days=7, microseconds=1)) is True
