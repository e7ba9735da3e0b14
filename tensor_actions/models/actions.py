"""
Solana Actions protocol models.

These models define the bodies exchanged with Actions clients: the GET
metadata response, the POST request and the POST response.
"""

from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class ActionParameter(BaseModel):
    """An input the client collects before following an action link."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Parameter name substituted into the href template")
    label: Optional[str] = Field(None, description="Prompt shown to the user")


class LinkedAction(BaseModel):
    """An action the client can follow directly."""
    model_config = ConfigDict(frozen=True)

    href: str = Field(..., description="Action URL, relative to the API origin")
    label: str = Field(..., description="Button text")


class ParameterizedAction(LinkedAction):
    """An action whose href is a template filled from user input."""

    parameters: Tuple[ActionParameter, ...] = Field(..., min_length=1)


Action = Union[ParameterizedAction, LinkedAction]


class ActionLinks(BaseModel):
    """Related actions offered by a metadata response."""
    model_config = ConfigDict(frozen=True)

    actions: Tuple[Action, ...] = Field(default_factory=tuple)


class ActionGetResponse(BaseModel):
    """Metadata returned by action GET endpoints."""

    icon: str = Field(..., description="Absolute image URL")
    label: str = Field(..., description="Default button text")
    title: str
    description: str
    links: Optional[ActionLinks] = None


class ActionPostRequest(BaseModel):
    """Body sent by the client when it requests a transaction.

    The account is passed through as given; the transaction builder rejects
    addresses it cannot use.
    """

    account: str = Field(
        ...,
        min_length=1,
        description="Address of the account that will sign",
        examples=["6Ew7F6UZ3F6Fj8LYKHXZL1qGqFJmPC5ZfxVbjrqJHrvQ"],
    )


class ActionPostResponse(BaseModel):
    """Body returned by action POST endpoints."""

    transaction: str = Field(..., description="Base64 serialized unsigned transaction")
