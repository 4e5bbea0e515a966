"""Settings schema model using Pydantic."""

from typing import Optional

from pydantic import BaseModel, Field

# The download manager stores the RPC port as an unsigned 32-bit value.
MAX_RPC_PORT = 2**32 - 1


class Config(BaseModel):
    """Download manager settings consumed by the notifier.

    Field names use the underscore spelling; the settings file uses hyphens
    and is normalized before decoding. Decoding is strict, so JSON types must
    match exactly. Options the notifier does not use are ignored.
    """

    download_dir: str = Field(..., description="Directory finished torrents are saved to")
    rpc_enabled: bool = Field(..., description="Whether the RPC interface is enabled")
    rpc_bind_address: str = Field(..., description="Address the RPC server listens on")
    rpc_port: int = Field(..., ge=0, le=MAX_RPC_PORT, description="RPC server port")
    rpc_authentication_required: bool = Field(
        ..., description="Whether RPC requests must authenticate"
    )
    rpc_url: str = Field(..., description="Base URL path of the RPC interface")
    rpc_username: str = Field(..., description="RPC username")
    rpc_plain_password: Optional[str] = Field(
        None, description="RPC password, required when authentication is enabled"
    )

    model_config = {"frozen": True, "strict": True, "extra": "ignore"}
