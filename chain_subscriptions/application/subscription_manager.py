"""Subscription manager application service.

This module orchestrates the subscription lifecycle and the gas/deposit
accounting by coordinating domain entities with the registry port. Every
operation is a synchronous read-modify-write through the registry; the
manager keeps no state of its own beyond its collaborators, so the
enclosing execution framework can revert anything it writes.
"""

from ..domain.enums import (
    RefundPolicy,
    ResubscribePolicy,
    SubscriptionAction,
    SubscriptionState,
)
from ..domain.exceptions import InsufficientDepositError, InvalidSubscriptionError
from ..domain.models import CallbackExecution, Subscription
from ..domain.services import (
    SubscriptionIdentityService,
    SubscriptionLifecycle,
    SubscriptionLogTopics,
)
from ..domain.value_objects import Address, Hash32, Selector
from ..ports.logger import LoggerPort
from ..ports.metrics import MetricsPort
from ..ports.registry import SubscriptionRegistryPort
from .config import SubscriptionManagerConfig


class SubscriptionManager:
    """Manages event subscriptions, notification fan-out and deposits.

    Errors:
        InvalidSubscriptionError: deposit/withdraw/update on an unknown identity
            (update also rejects cancelled subscriptions)
        InsufficientDepositError: withdrawal larger than the balance
        GasRefundError: refund reporting more gas than the limit, under
            RefundPolicy.REJECT

    Every other irregular request (re-subscribing while active, cancelling an
    unknown or cancelled identity, refunding an unknown identity, notifying an
    underfunded subscription) is a silent no-op or skip.
    """

    def __init__(
        self,
        registry: SubscriptionRegistryPort,
        identity_service: SubscriptionIdentityService,
        config: SubscriptionManagerConfig | None = None,
        logger: LoggerPort | None = None,
        metrics: MetricsPort | None = None,
    ):
        """Initialize the manager with its collaborators.

        Args:
            registry: Owner of all subscription state and registry logs
            identity_service: Derives subscription identities
            config: Protocol rules (registry address, policies)
            logger: Optional operational logger
            metrics: Optional metrics collector
        """
        self._registry = registry
        self._identity = identity_service
        self._config = config or SubscriptionManagerConfig()
        self._logger = logger
        self._metrics = metrics

    @property
    def config(self) -> SubscriptionManagerConfig:
        """Protocol configuration in use."""
        return self._config

    def subscribe(
        self,
        target: Address,
        event_signature: Hash32,
        subscriber: Address,
        callback: Address,
        selector: Selector,
        gas_limit: int,
        gas_price: int,
    ) -> Hash32:
        """Register a subscription, or return the identity of the active one.

        A cancelled identity is replaced by a fresh record; its residual
        deposit is kept or dropped according to the resubscribe policy.

        Returns:
            The subscription identity
        """
        sub_id = self._identity.compute(target, event_signature, subscriber)
        existing = self._registry.get(sub_id)
        state = existing.state if existing is not None else SubscriptionState.UNREGISTERED

        if SubscriptionLifecycle.is_noop(state, SubscriptionAction.SUBSCRIBE):
            if self._logger:
                self._logger.debug("Subscription already active", subscription_id=str(sub_id))
            return sub_id

        deposit = 0
        if existing is not None and existing.deposit_balance > 0:
            if self._config.resubscribe_policy == ResubscribePolicy.PRESERVE_DEPOSIT:
                deposit = existing.deposit_balance
            elif self._logger:
                self._logger.warning(
                    "Discarding residual deposit of cancelled subscription",
                    subscription_id=str(sub_id),
                    discarded=existing.deposit_balance,
                )

        subscription = Subscription(
            id=sub_id,
            target_contract=target,
            event_signature=event_signature,
            subscriber_contract=subscriber,
            callback_address=callback,
            callback_selector=selector,
            gas_limit=gas_limit,
            gas_price=gas_price,
            deposit_balance=deposit,
            active=True,
        )
        self._registry.set(sub_id, subscription)
        self._registry.append_log(
            SubscriptionLogTopics.created(
                self._config.registry_address, sub_id, target, subscriber, event_signature
            )
        )

        if self._logger:
            self._logger.info(
                "Subscription created",
                subscription_id=str(sub_id),
                previous_state=state.value,
                target=str(target),
                subscriber=str(subscriber),
            )
        if self._metrics:
            self._metrics.increment("subscriptions.created")
        return sub_id

    def unsubscribe(self, target: Address, event_signature: Hash32, subscriber: Address) -> None:
        """Deactivate a subscription. The deposit is not refunded."""
        sub_id = self._identity.compute(target, event_signature, subscriber)
        subscription = self._registry.get(sub_id)
        state = subscription.state if subscription is not None else SubscriptionState.UNREGISTERED

        if SubscriptionLifecycle.is_noop(state, SubscriptionAction.UNSUBSCRIBE):
            return

        subscription.active = False
        self._registry.set(sub_id, subscription)
        self._registry.append_log(
            SubscriptionLogTopics.removed(self._config.registry_address, sub_id)
        )

        if self._logger:
            self._logger.info(
                "Subscription removed",
                subscription_id=str(sub_id),
                residual_deposit=subscription.deposit_balance,
            )
        if self._metrics:
            self._metrics.increment("subscriptions.removed")

    def notify_subscribers(
        self,
        target: Address,
        event_signature: Hash32,
        event_data: bytes,
        origin: Address,
    ) -> list[CallbackExecution]:
        """Charge eligible subscriptions and build their callback requests.

        Subscriptions are visited in the registry's stable order. Inactive
        ones are skipped; underfunded ones are skipped with an
        insufficient-deposit log. Each selected subscription is charged
        gas_limit * gas_price and persisted before moving on.

        Returns:
            One CallbackExecution per charged subscription, in visit order
        """
        callbacks: list[CallbackExecution] = []

        subscriptions = self._registry.list_by_target_and_signature(target, event_signature)
        for subscription in subscriptions:
            if not subscription.active:
                continue

            if not subscription.deduct_gas():
                self._registry.append_log(
                    SubscriptionLogTopics.insufficient_deposit(
                        self._config.registry_address, subscription.id
                    )
                )
                if self._logger:
                    self._logger.debug(
                        "Skipping underfunded subscription",
                        subscription_id=str(subscription.id),
                        balance=subscription.deposit_balance,
                        gas_cost=subscription.gas_cost(),
                    )
                if self._metrics:
                    self._metrics.increment("callbacks.insufficient_deposit")
                continue

            self._registry.set(subscription.id, subscription)
            callbacks.append(
                CallbackExecution(
                    subscription_id=subscription.id,
                    subscriber_address=subscription.subscriber_contract,
                    callback_address=subscription.callback_address,
                    callback_data=subscription.callback_selector.value + bytes(event_data),
                    gas_limit=subscription.gas_limit,
                    gas_price=subscription.gas_price,
                    original_origin=origin,
                )
            )

        if self._logger:
            self._logger.debug(
                "Notified subscribers",
                target=str(target),
                event_signature=str(event_signature),
                callbacks=len(callbacks),
            )
        if self._metrics:
            self._metrics.increment("callbacks.authorized", len(callbacks))
            self._metrics.gauge("notify.subscriptions", len(subscriptions))
            self._metrics.record("notify.fanout", len(callbacks))
        return callbacks

    def deposit(self, subscription_id: Hash32, amount: int) -> None:
        """Credit a subscription's deposit. Cancelled subscriptions are accepted.

        The sign of amount is not checked here; callers transfer value in and
        must pass a non-negative amount. One that would leave the balance
        below zero fails validation and writes nothing.

        Raises:
            InvalidSubscriptionError: If no record exists
        """
        subscription = self._require(subscription_id)
        subscription.deposit_balance = subscription.deposit_balance + amount
        self._registry.set(subscription_id, subscription)

        if self._logger:
            self._logger.debug(
                "Deposit credited",
                subscription_id=str(subscription_id),
                amount=amount,
                balance=subscription.deposit_balance,
            )
        if self._metrics:
            self._metrics.increment("deposits.credited")

    def withdraw(self, subscription_id: Hash32, amount: int) -> None:
        """Debit a subscription's deposit; no partial withdrawals.

        The sign of amount is not checked here; callers transfer value out and
        must pass a non-negative amount. A negative amount credits the deposit.

        Raises:
            InvalidSubscriptionError: If no record exists
            InsufficientDepositError: If the balance is below amount
        """
        subscription = self._require(subscription_id)
        if subscription.deposit_balance < amount:
            raise InsufficientDepositError(subscription_id, subscription.deposit_balance, amount)

        subscription.deposit_balance = subscription.deposit_balance - amount
        self._registry.set(subscription_id, subscription)

        if self._logger:
            self._logger.debug(
                "Deposit withdrawn",
                subscription_id=str(subscription_id),
                amount=amount,
                balance=subscription.deposit_balance,
            )
        if self._metrics:
            self._metrics.increment("deposits.withdrawn")

    def get_balance(self, subscription_id: Hash32) -> int:
        """Deposit balance of a subscription, 0 if unknown."""
        subscription = self._registry.get(subscription_id)
        if subscription is None:
            return 0
        return subscription.deposit_balance

    def get_subscription(self, subscription_id: Hash32) -> Subscription | None:
        """Read a subscription through the registry."""
        return self._registry.get(subscription_id)

    def subscription_state(self, subscription_id: Hash32) -> SubscriptionState:
        """Lifecycle state of an identity."""
        subscription = self._registry.get(subscription_id)
        if subscription is None:
            return SubscriptionState.UNREGISTERED
        return subscription.state

    def refund_gas(self, subscription_id: Hash32, gas_used: int) -> None:
        """Credit the unused gas of an executed callback. No-op if unknown.

        Raises:
            GasRefundError: If gas_used exceeds the gas limit under
                RefundPolicy.REJECT (nothing is written)
        """
        subscription = self._registry.get(subscription_id)
        if subscription is None:
            return

        saturate = self._config.refund_policy == RefundPolicy.SATURATE
        if gas_used > subscription.gas_limit and self._logger:
            log = self._logger.warning if saturate else self._logger.error
            log(
                "Reported gas exceeds gas limit",
                subscription_id=str(subscription_id),
                gas_limit=subscription.gas_limit,
                gas_used=gas_used,
                policy=self._config.refund_policy.value,
            )
        refund = subscription.refund_gas(gas_used, saturate=saturate)
        self._registry.set(subscription_id, subscription)

        if self._logger:
            self._logger.debug(
                "Gas refunded",
                subscription_id=str(subscription_id),
                gas_used=gas_used,
                refund=refund,
            )
        if self._metrics:
            self._metrics.increment("gas.refunded")

    def update_subscription(self, subscription_id: Hash32, gas_limit: int, gas_price: int) -> None:
        """Replace the gas parameters of an active subscription.

        Previously charged amounts are not reconciled.

        Raises:
            InvalidSubscriptionError: If no record exists or it is cancelled
        """
        subscription = self._require(subscription_id)
        if not subscription.active:
            raise InvalidSubscriptionError(subscription_id, "subscription is not active")

        subscription.gas_limit = gas_limit
        subscription.gas_price = gas_price
        self._registry.set(subscription_id, subscription)

        if self._logger:
            self._logger.debug(
                "Subscription updated",
                subscription_id=str(subscription_id),
                gas_limit=gas_limit,
                gas_price=gas_price,
            )

    def _require(self, subscription_id: Hash32) -> Subscription:
        subscription = self._registry.get(subscription_id)
        if subscription is None:
            raise InvalidSubscriptionError(subscription_id)
        return subscription
