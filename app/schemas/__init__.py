from .common import (
	ApiResponse,
	CamelModel,
	LocalizedText,
	MessageResponse,
)
from .user import AuthorSummary
from .category import (
	CategoryResponse,
	LanguagesResponse,
)
from .comment import (
	CommentCreate,
	CommentUpdate,
	CommentResponse,
	LocalizedCommentResponse,
)
from .post import (
	AttachmentSchema,
	PostCreate,
	PostUpdate,
	PostResponse,
	LocalizedPostResponse,
	PostDetailResponse,
	PaginationInfo,
	PostListResponse,
	LikeToggleResponse,
	PostListParams,
)

__all__ = [
	"ApiResponse",
	"CamelModel",
	"LocalizedText",
	"MessageResponse",
	"AuthorSummary",
	"CategoryResponse",
	"LanguagesResponse",
	"CommentCreate",
	"CommentUpdate",
	"CommentResponse",
	"LocalizedCommentResponse",
	"AttachmentSchema",
	"PostCreate",
	"PostUpdate",
	"PostResponse",
	"LocalizedPostResponse",
	"PostDetailResponse",
	"PaginationInfo",
	"PostListResponse",
	"LikeToggleResponse",
	"PostListParams",
]
