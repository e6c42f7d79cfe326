from txsummary.infra.rpc.client import EVMRPCClient

__all__ = ["EVMRPCClient"]
