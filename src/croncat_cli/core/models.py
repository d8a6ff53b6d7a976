"""Pydantic models for network configuration and contract query documents."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BINARY = "junod"
DEFAULT_NODE = "https://rpc.uni.juno.deuslabs.fi:443"
DEFAULT_CHAIN_ID = "uni-2"


class OutputFormat(str, Enum):
    """Output formats accepted by the node client's ``--output`` flag."""

    text = "text"
    json = "json"


class NetworkConfig(BaseModel):
    """Parameters that direct the node client at a network."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    binary: str = Field(default=DEFAULT_BINARY, description="Node client executable")
    node: str = Field(default=DEFAULT_NODE, description="Tendermint RPC endpoint")
    chain_id: str | None = Field(default=DEFAULT_CHAIN_ID, description="Chain identifier")
    output: OutputFormat | None = Field(
        default=None, description="Node client output format"
    )
    height: int | None = Field(
        default=None, ge=0, description="Query state at this block height"
    )
    extra_flags: list[str] = Field(
        default_factory=list, description="Flags appended verbatim to every query"
    )
    cwd: str | None = Field(
        default=None, description="Working directory for the node client"
    )

    @field_validator("binary", "node")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    def network_flags(self) -> list[str]:
        """Return the flags appended to every ``query`` invocation."""
        flags = ["--node", self.node]
        if self.chain_id:
            flags += ["--chain-id", self.chain_id]
        if self.output is not None:
            flags += ["--output", self.output.value]
        if self.height is not None:
            flags += ["--height", str(self.height)]
        flags.extend(self.extra_flags)
        return flags


class QueryMessage(BaseModel):
    """A contract query document: one variant key mapping to its parameters."""

    model_config = ConfigDict(frozen=True)

    variant: str
    params: dict[str, Any] = Field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        return {self.variant: dict(self.params)}

    def to_json(self) -> str:
        """Serialize compactly, e.g. ``{"get_tasks":{}}``."""
        return json.dumps(self.to_document(), separators=(",", ":"))


GET_TASKS = QueryMessage(variant="get_tasks")
GET_AGENT_IDS = QueryMessage(variant="get_agent_ids")


def get_agent(account_id: str) -> QueryMessage:
    return QueryMessage(variant="get_agent", params={"account_id": account_id})


def get_agent_tasks(account_id: str) -> QueryMessage:
    return QueryMessage(variant="get_agent_tasks", params={"account_id": account_id})
