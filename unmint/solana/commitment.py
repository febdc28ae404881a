from enum import IntEnum

from solana.rpc import commitment as rpc_commitment


class Commitment(IntEnum):
    """Used to indicate to Solana nodes which bank state to query.
    See: https://docs.solana.com/apps/jsonrpc-api#configuring-state-commitment

    PROCESSED: The node will query its most recent block.
    CONFIRMED: The node will query the most recent block that has been voted on by supermajority of the cluster.
    FINALIZED: The node will query the most recent block confirmed by supermajority of the cluster as having reached
        maximum lockout.
    """
    PROCESSED = 0
    CONFIRMED = 1
    FINALIZED = 2

    def to_rpc(self) -> rpc_commitment.Commitment:
        if self == Commitment.PROCESSED:
            return rpc_commitment.Processed
        if self == Commitment.CONFIRMED:
            return rpc_commitment.Confirmed
        if self == Commitment.FINALIZED:
            return rpc_commitment.Finalized

        raise ValueError(f'unknown commitment value of {self}')
