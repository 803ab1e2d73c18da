from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class RegisterSellerRequest(BaseModel):
    # Optional so presence rules produce our own messages, in order
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            'example': {
                'fullName': 'Test Seller',
                'email': 'test2@example.com',
                'phone': '+1234567890',
                'password': 'password123',
                'confirmPassword': 'password123',
            }
        }


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'email': 'test2@example.com',
                'password': 'password123',
            }
        }


class UpdateSellerProfileRequest(BaseModel):
    """Unknown keys (including password) are ignored"""

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            'example': {
                'fullName': 'Renamed Seller',
                'phone': '+1987654321',
            }
        }


class SellerResponse(BaseModel):
    id: int
    full_name: str
    email: str
    phone: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            'example': {
                'id': 1,
                'fullName': 'Test Seller',
                'email': 'test2@example.com',
                'phone': '+1234567890',
                'createdAt': '2024-01-01T00:00:00Z',
                'updatedAt': '2024-01-01T00:00:00Z',
            }
        }


class SellerAuthData(BaseModel):
    seller: SellerResponse
    token: str


class SellerAuthResponse(BaseModel):
    status: Literal['success'] = 'success'
    data: SellerAuthData


class SellerData(BaseModel):
    seller: SellerResponse


class SellerEnvelopeResponse(BaseModel):
    status: Literal['success'] = 'success'
    data: SellerData
