"""
Chain configuration endpoint.

Publishes the network and contract coordinates the web client needs to
stake through the external debate contract. The service itself never
calls the contract.
"""

from fastapi import APIRouter

from shared.config import get_settings
from shared.models import CamelModel

router = APIRouter()


class ChainConfigResponse(CamelModel):
    """Where the staking contract lives."""

    chain_id: int
    network_name: str
    rpc_url: str
    block_explorer: str
    debate_contract_address: str
    token_address: str


@router.get("/chain", response_model=ChainConfigResponse)
async def get_chain_config() -> ChainConfigResponse:
    """
    Get the chain and contract addresses configured for this deployment.
    """
    settings = get_settings()
    return ChainConfigResponse(
        chain_id=settings.chain_id,
        network_name=settings.chain_network_name,
        rpc_url=settings.chain_rpc_url,
        block_explorer=settings.chain_block_explorer,
        debate_contract_address=settings.debate_contract_address,
        token_address=settings.debate_token_address,
    )
