import math
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


# Error type tag used by the request validation handler
PRODUCT_FIELD_ERROR = "product_field"

NAME_REQUIRED = "Product name is required and must be a non-empty string"
PRICE_REQUIRED = "Price is required and must be a non-negative number"
IN_STOCK_REQUIRED = "inStock is required and must be a boolean value"

NAME_INVALID = "Product name must be a non-empty string"
PRICE_INVALID = "Price must be a non-negative number"
IN_STOCK_INVALID = "inStock must be a boolean value"

# Messages for fields missing from a create payload, keyed by wire name
REQUIRED_MESSAGES = {
	"name": NAME_REQUIRED,
	"price": PRICE_REQUIRED,
	"inStock": IN_STOCK_REQUIRED,
}


def _field_error(message: str) -> PydanticCustomError:
	return PydanticCustomError(PRODUCT_FIELD_ERROR, message)


def clean_name(value, message: str) -> str:
	if not isinstance(value, str) or not value.strip():
		raise _field_error(message)
	return value.strip()


def check_price(value, message: str) -> Union[int, float]:
	# bool is an int subclass but not a price
	if isinstance(value, bool) or not isinstance(value, (int, float)):
		raise _field_error(message)
	if isinstance(value, float) and not math.isfinite(value):
		raise _field_error(message)
	if value < 0:
		raise _field_error(message)
	return value


def check_in_stock(value, message: str) -> bool:
	if not isinstance(value, bool):
		raise _field_error(message)
	return value


class Product(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	id: int
	name: str
	price: Union[int, float]
	in_stock: bool = Field(alias="inStock")


class ProductCreate(BaseModel):
	name: str
	price: Union[int, float]
	in_stock: bool = Field(alias="inStock")

	@field_validator("name", mode="before")
	@classmethod
	def validate_name(cls, value):
		return clean_name(value, NAME_REQUIRED)

	@field_validator("price", mode="before")
	@classmethod
	def validate_price(cls, value):
		return check_price(value, PRICE_REQUIRED)

	@field_validator("in_stock", mode="before")
	@classmethod
	def validate_in_stock(cls, value):
		return check_in_stock(value, IN_STOCK_REQUIRED)


class ProductUpdate(BaseModel):
	"""Per-field replacement. Absent fields are left as they are; an explicit
	null counts as present and fails the field check."""

	name: Optional[str] = None
	price: Optional[Union[int, float]] = None
	in_stock: Optional[bool] = Field(default=None, alias="inStock")

	@field_validator("name", mode="before")
	@classmethod
	def validate_name(cls, value):
		return clean_name(value, NAME_INVALID)

	@field_validator("price", mode="before")
	@classmethod
	def validate_price(cls, value):
		return check_price(value, PRICE_INVALID)

	@field_validator("in_stock", mode="before")
	@classmethod
	def validate_in_stock(cls, value):
		return check_in_stock(value, IN_STOCK_INVALID)

	def changes(self) -> dict:
		"""Fields the client actually sent, keyed by wire name."""
		return self.model_dump(exclude_unset=True, by_alias=True)


class ProductListResponse(BaseModel):
	success: bool = True
	count: int
	data: List[Dict[str, Any]]


class ProductDetailResponse(BaseModel):
	success: bool = True
	data: Dict[str, Any]


class ProductResponse(BaseModel):
	success: bool = True
	message: str
	data: Dict[str, Any]
