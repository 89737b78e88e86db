from app.database import Base, engine
from app.models import (
    user,
    post,
    post_like,
    comment,
    comment_like,
)

print("Creating database tables...")
Base.metadata.create_all(bind=engine)
print("✅ All tables created successfully!")
