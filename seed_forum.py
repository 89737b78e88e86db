"""
Seed demo users and bilingual forum posts.
Run: python seed_forum.py
"""

from app.crud import crud_comment, crud_post, crud_user
from app.database import SessionLocal
from app.models.post import PostCategory
from app.models.user import UserRole
from app.schemas import CommentCreate, PostCreate
from app.core.security import create_access_token

DEMO_USERS = [
    {"name": "Asha Devi", "email": "asha@example.com", "role": UserRole.PRODUCER.value},
    {"name": "Ravi Kumar", "email": "ravi@example.com", "role": UserRole.CONSUMER.value},
    {"name": "Forum Admin", "email": "admin@example.com", "role": UserRole.ADMIN.value},
]


def seed_users(db):
    users = []
    for data in DEMO_USERS:
        user = crud_user.get_by_email(db, data["email"])
        if user:
            print(f"   ✅ User already exists: {user.email}")
        else:
            user = crud_user.create(db, obj_in=data)
            print(f"   ✅ Created user: {user.name} (ID: {user.id}, role: {user.role})")
        users.append(user)
    return users


def seed_posts(db, producer, consumer, admin):
    welcome = crud_post.create_post(
        db,
        author_id=admin.id,
        post_in=PostCreate(
            title={"en": "Welcome to the GOSHALA forum", "hi": "गोशाला फोरम में आपका स्वागत है"},
            content={"en": "Introduce yourself and your farm.", "hi": "अपना और अपने खेत का परिचय दें।"},
            category=PostCategory.GENERAL,
            tags=["welcome"],
            is_sticky=True,
            is_announcement=True,
        ),
    )
    print(f"   ✅ Created sticky post: {welcome.id}")

    compost = crud_post.create_post(
        db,
        author_id=producer.id,
        post_in=PostCreate(
            title={"en": "Making compost from cow dung", "hi": "गोबर से खाद बनाना"},
            content={"en": "Layer dung with dry leaves and turn weekly."},
            category=PostCategory.ORGANIC_FARMING,
            tags=["compost", "organic"],
        ),
    )
    print(f"   ✅ Created post: {compost.id}")

    question = crud_comment.create_comment(
        db,
        post_id=compost.id,
        author_id=consumer.id,
        comment_in=CommentCreate(content={"en": "How long until it is ready?"}),
    )
    crud_comment.create_comment(
        db,
        post_id=compost.id,
        author_id=producer.id,
        comment_in=CommentCreate(
            content={"en": "About eight weeks in summer.", "hi": "गर्मियों में लगभग आठ सप्ताह।"},
            parent_comment=question.id,
        ),
    )
    print(f"   ✅ Created comment thread on post {compost.id}")


def main():
    print("\n🌱 Seeding GOSHALA forum...")
    db = SessionLocal()
    try:
        producer, consumer, admin = seed_users(db)
        seed_posts(db, producer, consumer, admin)
        for user in (producer, consumer, admin):
            token = create_access_token({"sub": str(user.id)})
            print(f"   🔑 {user.email}: {token}")
    finally:
        db.close()
    print("✅ Done")


if __name__ == "__main__":
    main()
