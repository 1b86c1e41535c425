from typing import Generic, List, Optional, TypeVar
from datetime import datetime

from pydantic import BaseModel, Field, ConfigDict


T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    """Standard API response wrapper for all endpoints"""
    success: bool = Field(True, description="Indicates if the request was successful")
    message: Optional[str] = Field(None, description="Human-readable message about the operation")
    data: Optional[T] = Field(None, description="Response data payload")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "message": "Folder successfully created.",
                "data": {"id": "507f1f77bcf86cd799439011", "name": "docs"}
            }
        }
    )

class ErrorDetail(BaseModel):
    """Detailed error information for validation errors"""
    code: str = Field(..., description="Error code identifier")
    message: str = Field(..., description="Human-readable error message")
    field: Optional[str] = Field(None, description="Field name that caused the error")

class ApiError(BaseModel):
    """Error response wrapper for failed operations

    Client errors carry their reason in `error`; server errors only carry a
    generic `message`.
    """
    success: bool = Field(False, description="Always false for error responses")
    error: Optional[str] = Field(None, description="Reason a client error was rejected")
    code: Optional[str] = Field(None, description="Machine readable error code")
    message: Optional[str] = Field(None, description="Generic message for server errors")
    errors: Optional[List[ErrorDetail]] = Field(None, description="Detailed error information")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "A folder with this name already exists in this directory",
                "code": "duplicate_name",
                "timestamp": "2024-01-15T10:30:00Z"
            }
        }
    )

class HealthCheck(BaseModel):
    """Health check response schema"""
    status: str = Field(..., description="Service status: healthy, or degraded when the store is unreachable")
    database: Optional[str] = Field(None, description="Document store reachability: up or down")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Health check timestamp")
    version: Optional[str] = Field(None, description="API version")
    uptime: Optional[float] = Field(None, description="Service uptime in seconds")
