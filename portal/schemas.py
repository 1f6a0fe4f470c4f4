"""Pydantic schemas for the gateway's request and response bodies."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import RoleEnum


class ErrorResponse(BaseModel):
    error: str


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    username: str
    role: str


class UserAddRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    admin_username: Optional[str] = Field(None, alias="adminUsername")
    username: str = Field(..., min_length=1, max_length=100)
    password: str
    role: RoleEnum


class UserAddResponse(BaseModel):
    success: bool = True
    id: int
    username: str
    role: str


class CreatedResponse(BaseModel):
    success: bool = True
    id: int


class FaultReportRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: Optional[str] = None
    issue: Optional[str] = None
    solution: Optional[str] = None
    media: Optional[str] = None
    approved: bool


class ApprovalResponse(BaseModel):
    updated: int = Field(..., ge=0, le=1)
    outcome: str


class CourseListRequest(BaseModel):
    role: Optional[str] = None


class CourseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: Optional[str] = None
    department: Optional[str] = None
    content: Optional[str] = None
    file_url: Optional[str] = None
    media_url: Optional[str] = None


class DriverLogCreate(BaseModel):
    date: Optional[str] = None
    name: Optional[str] = None


class DriverLogRead(DriverLogCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


class AnnouncementCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    created_by: Optional[str] = None


class AnnouncementRead(AnnouncementCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime


class LocationPhotoRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    department: Optional[str] = None
    title: Optional[str] = None
    image_url: Optional[str] = None
