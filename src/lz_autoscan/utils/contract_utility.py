from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.middleware import SignAndSendRawMiddlewareBuilder


class ContractUtility:
    """
    Web3 connection to the destination chain.

    With a secret, transactions sent through `w3` are signed locally by that
    key; without one the connection is read-only.
    """

    def __init__(self, rpc_url: str, secret: str = "", request_timeout: int | None = None) -> None:
        """
        Initialize the ContractUtility.

        Args:
            rpc_url: RPC URL of the destination chain (required)
            secret: Private key for signing transactions (optional)
            request_timeout: HTTP timeout in seconds for RPC requests
        """
        if not rpc_url:
            raise ValueError("RPC URL is required")

        self.rpc_url = rpc_url
        self.account: LocalAccount | None = None

        request_kwargs = {"timeout": request_timeout} if request_timeout else None
        self.w3 = Web3(Web3.HTTPProvider(self.rpc_url, request_kwargs=request_kwargs))

        if secret:
            self._add_signing_middleware(secret)

    def _add_signing_middleware(self, secret: str) -> None:
        """
        Add signing middleware to the existing Web3 instance.

        Args:
            secret: Private key for signing transactions
        """
        if not secret:
            raise ValueError("Private key is required for signing transactions")

        account: LocalAccount = Account.from_key(secret)
        self.w3.middleware_onion.add(SignAndSendRawMiddlewareBuilder.build(account))
        self.w3.eth.default_account = account.address
        self.account = account

    @property
    def address(self) -> str | None:
        return self.account.address if self.account else None
