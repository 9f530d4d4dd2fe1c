"""Exception hierarchy for chain parameter resolution and genesis verification."""

from __future__ import annotations


class ChainParamsError(Exception):
    """
    Base exception for all chain-parameter errors.

    Every error is terminal for the call that raised it: it signals an
    unregistered chain or a data defect, never a transient condition.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class RegistryLookupError(ChainParamsError):
    """Base class for registry lookups that found nothing."""


class UnknownChainError(RegistryLookupError):
    """
    Raised when a chain ID is not present in the registry.

    Attributes:
        chain_id: The chain ID that was requested.
    """

    def __init__(self, chain_id: int) -> None:
        self.chain_id = chain_id
        super().__init__(f"unknown chain ID: {chain_id}")


class UnknownSuperchainError(RegistryLookupError):
    """
    Raised when a chain names a superchain group the registry does not hold.

    Attributes:
        chain_id: The chain whose metadata referenced the group.
        superchain: The missing grouping key.
    """

    def __init__(self, chain_id: int, superchain: str) -> None:
        self.chain_id = chain_id
        self.superchain = superchain
        super().__init__(f"unknown superchain {superchain!r} for chain {chain_id}")


class ChainConfigError(ChainParamsError):
    """Base class for an inconsistent chain configuration."""


class ForkOrderError(ChainConfigError):
    """
    Raised when fork activations are out of historical order.

    Attributes:
        chain_id: The chain being configured.
        fork: The fork that activates too early, or is set after an unset one.
        activation: Its activation point (None when it is the unset fork).
        previous_fork: The fork it must not precede.
        previous_activation: That fork's activation point.
    """

    def __init__(
        self,
        chain_id: int,
        fork: str,
        activation: int | None,
        *,
        previous_fork: str,
        previous_activation: int | None,
    ) -> None:
        self.chain_id = chain_id
        self.fork = fork
        self.activation = activation
        self.previous_fork = previous_fork
        self.previous_activation = previous_activation

        if previous_activation is None:
            msg = (
                f"chain {chain_id}: unsupported fork ordering: {previous_fork} not enabled, "
                f"but {fork} enabled at {activation}"
            )
        else:
            msg = (
                f"chain {chain_id}: unsupported fork ordering: {previous_fork} enabled at "
                f"{previous_activation}, but {fork} enabled at {activation}"
            )
        super().__init__(msg)


class GenesisError(ChainParamsError):
    """Base class for genesis construction and verification errors."""


class ExtraDataTooLargeError(GenesisError):
    """
    Raised when the genesis extra-data exceeds the header limit.

    Attributes:
        chain_id: The chain whose genesis was being built.
        size: Length of the offending extra-data in bytes.
        limit: The maximum allowed length.
    """

    def __init__(self, chain_id: int, size: int, limit: int) -> None:
        self.chain_id = chain_id
        self.size = size
        self.limit = limit
        super().__init__(
            f"chain {chain_id} must have {limit} bytes or less extra-data in genesis, got {size}"
        )


class GenesisHashMismatchError(GenesisError):
    """
    Raised when a recomputed genesis hash differs from the registry's.

    Attributes:
        chain_id: The chain whose genesis failed verification.
        computed: The hash produced from the candidate genesis.
        expected: The hash recorded in the registry.
    """

    def __init__(self, chain_id: int, computed: bytes, expected: bytes) -> None:
        self.chain_id = chain_id
        self.computed = computed
        self.expected = expected
        super().__init__(
            f"chain {chain_id}: produced genesis with hash 0x{computed.hex()} "
            f"but expected 0x{expected.hex()}"
        )
