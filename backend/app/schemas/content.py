"""Schemas for the marketing content managed from the admin area."""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field

from backend.app.schemas.common import CamelModel

Difficulty = Literal["BEGINNER", "INTERMEDIATE", "ADVANCED"]


class VisibilityUpdate(CamelModel):
    """Body of the publish/feature toggle switches."""

    is_public: Optional[bool] = None
    is_featured: Optional[bool] = None


# Course categories

class CourseCategoryCreate(CamelModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    is_active: bool = True


class CourseCategoryUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class CourseCategoryRead(CamelModel):
    id: int
    title: str
    slug: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime


class CategorySummary(CamelModel):
    id: int
    title: str
    slug: str


# Blog and FAQ categories

class ContentCategoryCreate(CamelModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    is_public: bool = True


class ContentCategoryUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    is_public: Optional[bool] = None


class ContentCategoryRead(CamelModel):
    id: int
    title: str
    slug: str
    description: Optional[str] = None
    is_public: bool
    created_at: datetime


class PublicCategoryRead(CamelModel):
    """Public category listing entry with the number of published items in it."""

    id: int
    title: str
    slug: str
    description: Optional[str] = None
    item_count: int


# Courses

class CourseCreate(CamelModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    category_id: Optional[int] = None
    fees: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    duration: Optional[str] = None
    difficulty: Difficulty = "BEGINNER"
    thumbnail_image: Optional[str] = None
    is_public: bool = True
    is_featured: bool = False


class CourseUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category_id: Optional[int] = None
    fees: Optional[Decimal] = None
    discount: Optional[Decimal] = None
    duration: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    thumbnail_image: Optional[str] = None
    is_public: Optional[bool] = None
    is_featured: Optional[bool] = None


class CourseRead(CamelModel):
    id: int
    title: str
    slug: str
    description: Optional[str] = None
    category_id: Optional[int] = None
    category: Optional[CategorySummary] = None
    fees: Optional[float] = None
    discount: Optional[float] = None
    duration: Optional[str] = None
    difficulty: Difficulty
    thumbnail_image: Optional[str] = None
    is_public: bool
    is_featured: bool
    created_at: datetime


# Blogs

class BlogCreate(CamelModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    content: str = ""
    category_id: Optional[int] = None
    thumbnail_image: Optional[str] = None
    read_time: Optional[str] = None
    tags: Optional[str] = None
    is_public: bool = False
    is_featured: bool = False


class BlogUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    content: Optional[str] = None
    category_id: Optional[int] = None
    thumbnail_image: Optional[str] = None
    read_time: Optional[str] = None
    tags: Optional[str] = None
    is_public: Optional[bool] = None
    is_featured: Optional[bool] = None


class BlogRead(CamelModel):
    id: int
    title: str
    slug: str
    description: Optional[str] = None
    content: str
    category_id: Optional[int] = None
    category: Optional[CategorySummary] = None
    author_id: Optional[int] = None
    thumbnail_image: Optional[str] = None
    read_time: Optional[str] = None
    tags: Optional[str] = None
    is_public: bool
    is_featured: bool
    created_at: datetime


class AuthorBlogCreate(CamelModel):
    """Blog draft submitted by its author. Publishing stays with admins."""

    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    content: str = ""
    category_id: Optional[int] = None
    thumbnail_image: Optional[str] = None
    read_time: Optional[str] = None
    tags: Optional[str] = None


class AuthorBlogUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    content: Optional[str] = None
    category_id: Optional[int] = None
    thumbnail_image: Optional[str] = None
    read_time: Optional[str] = None
    tags: Optional[str] = None


# FAQs

class FaqCreate(CamelModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    category_id: Optional[int] = None
    is_public: bool = True
    is_featured: bool = False


class FaqUpdate(CamelModel):
    question: Optional[str] = Field(default=None, min_length=1)
    answer: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    category_id: Optional[int] = None
    is_public: Optional[bool] = None
    is_featured: Optional[bool] = None


class FaqRead(CamelModel):
    id: int
    question: str
    answer: str
    slug: str
    category_id: Optional[int] = None
    category: Optional[CategorySummary] = None
    is_public: bool
    is_featured: bool
    created_at: datetime


# Placements

class PlacementCreate(CamelModel):
    student_name: str = Field(min_length=1)
    course_name: Optional[str] = None
    avatar: Optional[str] = None
    company_name: str = Field(min_length=1)
    package_offered: Optional[str] = None
    position: Optional[str] = None
    dialogue: Optional[str] = None
    is_public: bool = True
    is_featured: bool = False


class PlacementUpdate(CamelModel):
    student_name: Optional[str] = Field(default=None, min_length=1)
    course_name: Optional[str] = None
    avatar: Optional[str] = None
    company_name: Optional[str] = Field(default=None, min_length=1)
    package_offered: Optional[str] = None
    position: Optional[str] = None
    dialogue: Optional[str] = None
    is_public: Optional[bool] = None
    is_featured: Optional[bool] = None


class PlacementRead(CamelModel):
    id: int
    student_name: str
    course_name: Optional[str] = None
    avatar: Optional[str] = None
    company_name: str
    package_offered: Optional[str] = None
    position: Optional[str] = None
    dialogue: Optional[str] = None
    is_public: bool
    is_featured: bool
    created_at: datetime


# Testimonials

class TestimonialCreate(CamelModel):
    student_name: str = Field(min_length=1)
    avatar: Optional[str] = None
    rating: int = Field(ge=1, le=5)
    feedback: str = Field(min_length=1)
    is_public: bool = False
    is_featured: bool = False


class TestimonialUpdate(CamelModel):
    student_name: Optional[str] = Field(default=None, min_length=1)
    avatar: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    feedback: Optional[str] = Field(default=None, min_length=1)
    is_public: Optional[bool] = None
    is_featured: Optional[bool] = None


class TestimonialRead(CamelModel):
    id: int
    student_name: str
    avatar: Optional[str] = None
    rating: int
    feedback: str
    is_public: bool
    is_featured: bool
    created_at: datetime


# Faculties

class FacultyCreate(CamelModel):
    name: str = Field(min_length=1)
    designation: Optional[str] = None
    domain: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    experience: Optional[str] = None
    students_mentored: Optional[str] = None
    ratings: Optional[float] = Field(default=None, ge=0, le=5)
    is_public: bool = True
    is_featured: bool = False


class FacultyUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    designation: Optional[str] = None
    domain: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    experience: Optional[str] = None
    students_mentored: Optional[str] = None
    ratings: Optional[float] = Field(default=None, ge=0, le=5)
    is_public: Optional[bool] = None
    is_featured: Optional[bool] = None


class FacultyRead(CamelModel):
    id: int
    name: str
    designation: Optional[str] = None
    domain: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None
    experience: Optional[str] = None
    students_mentored: Optional[str] = None
    ratings: Optional[float] = None
    is_public: bool
    is_featured: bool
    created_at: datetime


# Reviews

class ReviewStats(CamelModel):
    average_rating: str
    total_reviews: int


class ReviewPagination(CamelModel):
    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class ReviewListResponse(CamelModel):
    success: bool = True
    data: list[TestimonialRead]
    stats: ReviewStats
    pagination: ReviewPagination


# Site search

class AuthorSummary(CamelModel):
    id: int
    name: str


class BlogSearchHit(CamelModel):
    id: int
    title: str
    slug: str
    description: Optional[str] = None
    thumbnail_image: Optional[str] = None
    read_time: Optional[str] = None
    category: Optional[CategorySummary] = None
    author: Optional[AuthorSummary] = None
    created_at: datetime
    type: Literal["blog"] = "blog"


class CourseSearchHit(CamelModel):
    id: int
    title: str
    slug: str
    description: Optional[str] = None
    thumbnail_image: Optional[str] = None
    fees: Optional[float] = None
    duration: Optional[str] = None
    difficulty: Difficulty
    category: Optional[CategorySummary] = None
    type: Literal["course"] = "course"


class SearchResults(CamelModel):
    blogs: list[BlogSearchHit] = []
    courses: list[CourseSearchHit] = []


class SearchResponse(CamelModel):
    success: bool = True
    data: SearchResults
    query: str
    total_results: int
    message: Optional[str] = None
