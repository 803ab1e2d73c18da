from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class CreateProductRequest(BaseModel):
    # Optional so the required-field message is ours, not a 422
    name: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    image: Optional[str] = None
    image_url: Optional[str] = None
    aesthetic: Optional[str] = None

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Vintage Leather Jacket',
                'price': 89.99,
                'description': 'Classic black leather jacket in excellent condition',
                'image': 'data:image/png;base64,iVBORw0KGgo=',
                'aesthetic': 'noir',
            }
        }


class UpdateProductRequest(BaseModel):
    name: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    aesthetic: Optional[str] = None
    status: Optional[str] = None
    sold_at: Optional[datetime] = Field(default=None, alias='soldAt')

    class Config:
        populate_by_name = True
        json_schema_extra = {
            'example': {
                'price': 79.99,
                'soldAt': '2024-01-01T00:00:00Z',
            }
        }

    @property
    def sold_at_provided(self) -> bool:
        """True for an explicit null as well as a timestamp"""
        return 'sold_at' in self.model_fields_set


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    description: str
    image_url: str
    aesthetic: str
    seller_id: int
    status: str
    sold_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        json_schema_extra = {
            'example': {
                'id': 1,
                'name': 'Vintage Leather Jacket',
                'price': 89.99,
                'description': 'Classic black leather jacket in excellent condition',
                'image_url': 'data:image/png;base64,iVBORw0KGgo=',
                'aesthetic': 'noir',
                'seller_id': 1,
                'status': 'available',
                'sold_at': None,
                'created_at': '2024-01-01T00:00:00Z',
                'updated_at': '2024-01-01T00:00:00Z',
            }
        }


class PublicProductResponse(ProductResponse):
    seller_name: Optional[str] = None
    seller_phone: Optional[str] = None
    seller_email: Optional[str] = None


class ProductData(BaseModel):
    product: ProductResponse


class ProductEnvelopeResponse(BaseModel):
    status: Literal['success'] = 'success'
    data: ProductData


class ProductListData(BaseModel):
    products: List[ProductResponse]


class ProductListResponse(BaseModel):
    status: Literal['success'] = 'success'
    results: int
    data: ProductListData


class PublicProductData(BaseModel):
    product: PublicProductResponse


class PublicProductEnvelopeResponse(BaseModel):
    status: Literal['success'] = 'success'
    data: PublicProductData


class PublicProductListData(BaseModel):
    products: List[PublicProductResponse]


class PublicProductListResponse(BaseModel):
    status: Literal['success'] = 'success'
    results: int
    data: PublicProductListData


class AestheticListData(BaseModel):
    aesthetics: List[str]


class AestheticListResponse(BaseModel):
    status: Literal['success'] = 'success'
    data: AestheticListData
