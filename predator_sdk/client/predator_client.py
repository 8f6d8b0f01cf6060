import json
import logging
import math
from dataclasses import replace
from typing import Any, Mapping, Optional, Union

from predator_sdk.core.encryptor import Encryptor
from predator_sdk.core.key_manager import KeyManager
from predator_sdk.core.transport import HttpTransport
from predator_sdk.domain.options import OperationOptions, SellOptions
from predator_sdk.domain.payload import PayloadBuilder, coerce_options, resolve_operation
from predator_sdk.utils.config import SdkConfig, create_default_config, read_config
from predator_sdk.utils.enums import KeyState, Operation
from predator_sdk.utils.errors import ValidationError, classify
from predator_sdk.utils.logger import ThreadLogger, create_console_handler, create_file_handler

OptionsInput = Union[OperationOptions, Mapping[str, Any]]

INVALID_PERCENTAGE = "Invalid percentage. Must be a number between 0 and 100."


def parse_percentage(value: Any) -> Union[int, float]:
    """
    Parse a sell percentage into a number in (0, 100].

    Integral values come back as ``int`` so the payload serializes as ``10``
    rather than ``10.0``.
    """
    if isinstance(value, bool):
        raise ValidationError(INVALID_PERCENTAGE)
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(INVALID_PERCENTAGE) from None
    if not math.isfinite(number) or number <= 0 or number > 100:
        raise ValidationError(INVALID_PERCENTAGE)
    return int(number) if number.is_integer() else number


class PredatorClient:
    """
    Main entry point for the Predator SDK.

    Every call fetches the encryption key on first use, builds the
    operation's payload, seals it and posts the envelope to ``/{operation}``.
    Failures are raised as ``DomainError`` subclasses.

    Example:
        async with PredatorClient() as client:
            result = await client.buy({
                "privateKeys": "your-private-key",
                "tokenAddress": "token-address",
                "amount": "0.001",
            })
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        config: Optional[SdkConfig] = None,
        config_path: Optional[str] = None,
        log_level: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        transport=None,
    ):
        """
        Args:
            base_url: Service endpoint, overrides the config value
            config: Ready-made configuration
            config_path: YAML configuration file, used when `config` is not given
            log_level: Console logging level, overrides the config value. With
                `logger`, it is applied to that logger with setLevel
            logger: Use this logger instead of creating a ThreadLogger
            transport: Object with async ``get(endpoint)`` and ``post(endpoint, body)``
        """
        self.thread_logger: Optional[ThreadLogger] = None
        if logger is not None:
            self.logger = logger
        else:
            self.thread_logger = ThreadLogger(name=f"predator-sdk.{id(self):x}", signal_level=log_level or "INFO")
            self.logger = self.thread_logger.get_logger()

        self.config = self._load_configuration(config, config_path).with_overrides(
            BaseUrl=base_url, ConsoleLevel=log_level
        )
        if logger is not None and log_level:
            logger.setLevel(self.config.ConsoleLevel)
        if self.thread_logger is not None:
            self._attach_default_handlers()

        self.transport = transport or HttpTransport(self.config, self.logger)
        self.key_manager = KeyManager(self.transport, self.logger, key_length=self.config.KeyLength)
        self.payload_builder = PayloadBuilder()
        self.encryptor = Encryptor()

    @property
    def base_url(self) -> str:
        return self.config.BaseUrl

    @property
    def state(self) -> KeyState:
        return self.key_manager.state

    def _load_configuration(self, config: Optional[SdkConfig], config_path: Optional[str]) -> SdkConfig:
        if config is not None:
            return config
        if config_path:
            return read_config(config_path, self.logger)
        return create_default_config(self.logger)

    def _attach_default_handlers(self):
        self.thread_logger.add_handler(
            create_console_handler(level=self.config.ConsoleLevel)
        )
        if self.config.LogFile:
            self.thread_logger.add_handler(
                create_file_handler(log_file=self.config.LogFile, level=self.config.FileLevel)
            )

    def add_log_handler(self, handler: logging.Handler):
        if self.thread_logger is None:
            self.logger.addHandler(handler)
        else:
            self.thread_logger.add_handler(handler)

    def remove_log_handler(self, handler: logging.Handler):
        if self.thread_logger is None:
            self.logger.removeHandler(handler)
        else:
            self.thread_logger.remove_handler(handler)

    async def initialize(self) -> "PredatorClient":
        """Fetch the encryption key now instead of on the first operation"""
        await self.key_manager.ensure()
        return self

    async def buy(self, options: OptionsInput) -> Any:
        """
        Buy tokens.

        Options: ``privateKeys``, ``tokenAddress``, ``amount`` (SOL to spend
        per wallet), or a BuyOptions.
        """
        return await self.execute(Operation.BUY, options)

    async def sell(self, options: OptionsInput) -> Any:
        """
        Sell a percentage of held tokens.

        Options: ``privateKeys``, ``tokenAddress``, ``percentage`` (e.g. "10"
        for 10%), or a SellOptions.

        Raises:
            ValidationError: percentage is not a number in (0, 100]
        """
        return await self.execute(Operation.SELL, options)

    async def create(self, options: OptionsInput) -> Any:
        """
        Create a new token.

        Options: ``privateKeys``, ``devPrivateKey``, ``amount``, ``name``,
        ``symbol`` and optionally ``description``, ``telegram``, ``twitter``,
        ``website``, ``file`` (logo URL), or a CreateOptions.
        """
        return await self.execute(Operation.CREATE, options)

    async def execute(self, operation: Union[Operation, str], options: OptionsInput) -> Any:
        op = resolve_operation(operation)
        # bad input is rejected before anything goes over the network
        prepared = self._prepare_options(op, options)

        await self.key_manager.ensure()
        payload = self.payload_builder.build(op, prepared)

        self.logger.info(f"Executing {op.value} operation")
        try:
            envelope = self.encryptor.seal(json.dumps(payload), self.key_manager.key)
            result = await self.transport.post(op.endpoint, {"encryptedData": envelope})
        except Exception as e:
            error = classify(e)
            self.logger.error(f"{op.value.capitalize()} operation failed: {error}")
            if error is e:
                raise
            raise error from e

        self.logger.info(f"{op.value.capitalize()} operation successful")
        return result

    def _prepare_options(self, op: Operation, options: OptionsInput) -> OperationOptions:
        prepared = coerce_options(op, options)
        if isinstance(prepared, SellOptions):
            prepared = replace(prepared, percentage=parse_percentage(prepared.percentage))
        return prepared

    def close(self):
        """Release the HTTP session and stop the log listener"""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()
        if self.thread_logger is not None:
            self.thread_logger.shutdown()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.close()

