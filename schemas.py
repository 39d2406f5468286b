from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostBase(BaseModel):
    title: str
    content: str


class PostCreate(PostBase):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


class PostUpdate(PostCreate):
    pass


class PostResponse(PostBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    published_at: datetime
    updated_at: datetime


class CommentBase(BaseModel):
    author: str
    content: str


class CommentCreate(CommentBase):
    author: str = Field(min_length=1)
    content: str = Field(min_length=1)


class CommentResponse(CommentBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    created_at: datetime


class PostDetailResponse(PostResponse):
    comments: list[CommentResponse] = []


class ProjectBase(BaseModel):
    title: str
    description: str
    category: str
    image_url: str | None = None
    video_url: str | None = None
    live_url: str | None = None
    repo_url: str | None = None


class ProjectCreate(ProjectBase):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1)


class ProjectResponse(ProjectBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class CreatedResponse(BaseModel):
    id: int


class SuccessResponse(BaseModel):
    success: bool = True


class CheckoutRequest(BaseModel):
    amount: int
    currency: str = "usd"
    name: str = "Support My Work"


class CheckoutResponse(BaseModel):
    id: str
    url: str | None = None
