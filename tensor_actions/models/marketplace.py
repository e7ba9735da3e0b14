"""Marketplace records read from the NFT data provider."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Listing(BaseModel):
    """An active sale listing for an NFT."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    price: Optional[str] = Field(None, description="Price in lamports, as an integer string")
    seller: str = Field(..., description="Seller wallet address")

    @field_validator("price", mode="before")
    @classmethod
    def price_as_text(cls, v: Union[str, int, None]) -> Optional[str]:
        """Keep the price as an integer string even when it arrives as a number."""
        if v is None:
            return None
        return str(int(v))


class NftInfo(BaseModel):
    """NFT metadata and listing state."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    mint: str
    name: str
    image_uri: str = Field(..., alias="imageUri")
    slug_display: str = Field(..., alias="slugDisplay")
    listing: Optional[Listing] = None

    @property
    def is_listed(self) -> bool:
        """Whether the NFT has a priced listing."""
        return self.listing is not None and self.listing.price is not None


class Collection(BaseModel):
    """Collection metadata and royalty terms."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    slug_display: Optional[str] = Field(None, alias="slugDisplay")
    description: str = ""
    sell_royalty_fee_bps: int = Field(0, alias="sellRoyaltyFeeBPS", ge=0)

    @field_validator("description", mode="before")
    @classmethod
    def description_or_empty(cls, v: Optional[str]) -> str:
        return v or ""
