"""
Tests for the post listing queries and like toggling at the CRUD layer.
"""
from sqlalchemy.sql.dml import Delete

from app.crud import crud_comment_like, crud_post, crud_post_like
from app.models import PostCategory, PostLike
from app.schemas.post import PostListParams


def test_sort_by_like_count(db, make_post, author, other_user, admin_user):
    quiet = make_post(title={"en": "Quiet"})
    loved = make_post(title={"en": "Loved"})
    liked = make_post(title={"en": "Liked"})
    for user in (author, other_user, admin_user):
        crud_post_like.toggle_like(db, target_id=loved.id, user_id=user.id)
    crud_post_like.toggle_like(db, target_id=liked.id, user_id=author.id)

    posts = crud_post.get_regular_posts(db, params=PostListParams(sort="likes", order="desc"))
    assert [p.id for p in posts] == [loved.id, liked.id, quiet.id]


def test_count_ignores_sticky_and_pagination(db, make_post):
    for _ in range(4):
        make_post()
    make_post(is_sticky=True)

    params = PostListParams(page=2, limit=3)
    sticky, posts, total = crud_post.list_posts(db, params=params)
    assert len(sticky) == 1
    assert len(posts) == 1
    assert total == 4


def test_filters_combine(db, make_post):
    make_post(title={"en": "Cow shed design"}, category=PostCategory.COW_CARE, tags=["shed"])
    make_post(title={"en": "Cow feed"}, category=PostCategory.COW_CARE, tags=["feed"])
    make_post(title={"en": "Cow shed sale"}, category=PostCategory.PRODUCT_INFO, tags=["shed"])

    params = PostListParams(category=PostCategory.COW_CARE, search="shed", tag="shed")
    assert [p.title["en"] for p in crud_post.get_regular_posts(db, params=params)] == ["Cow shed design"]
    assert crud_post.count_regular_posts(db, params=params) == 1


def test_comment_counts(db, make_post, make_comment):
    busy = make_post()
    empty = make_post()
    top = make_comment(busy)
    make_comment(busy, parent=top)

    assert crud_post.get_comment_counts(db, post_ids=[busy.id, empty.id]) == {busy.id: 2}
    assert crud_post.get_comment_counts(db, post_ids=[]) == {}


def test_increment_views_reports_missing_post(db):
    assert crud_post.increment_views(db, post_id=12345) is False


def test_toggle_like_is_an_involution(db, make_post, make_comment, other_user):
    post = make_post()
    comment = make_comment(post)

    assert crud_post_like.toggle_like(db, target_id=post.id, user_id=other_user.id) == (True, 1)
    assert crud_post_like.toggle_like(db, target_id=post.id, user_id=other_user.id) == (False, 0)
    assert crud_comment_like.toggle_like(db, target_id=comment.id, user_id=other_user.id) == (True, 1)
    assert crud_comment_like.count_likes(db, target_id=comment.id) == 1


def test_toggle_like_absorbs_concurrent_duplicate_insert(db, make_post, other_user, monkeypatch):
    post = make_post()
    # Row written by a racing request from the same user
    db.add(PostLike(post_id=post.id, user_id=other_user.id))
    db.commit()

    class _NothingDeleted:
        rowcount = 0

    real_execute = db.execute

    def execute_before_race(statement, *args, **kwargs):
        # The DELETE ran before the other request committed its insert
        if isinstance(statement, Delete):
            return _NothingDeleted()
        return real_execute(statement, *args, **kwargs)

    monkeypatch.setattr(db, "execute", execute_before_race)

    assert crud_post_like.toggle_like(db, target_id=post.id, user_id=other_user.id) == (True, 1)
    monkeypatch.undo()
    assert crud_post_like.count_likes(db, target_id=post.id) == 1
