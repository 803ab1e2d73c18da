from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel


def seller_model_to_entity(
    seller_model: SellerModel, *, include_password: bool = False
) -> SellerEntity:
    return SellerEntity(
        id=seller_model.id,
        email=seller_model.email,
        full_name=seller_model.full_name,
        phone=seller_model.phone,
        hashed_password=seller_model.hashed_password if include_password else '',
        created_at=seller_model.created_at,
        updated_at=seller_model.updated_at,
    )
