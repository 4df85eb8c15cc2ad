"""Registry and runner for third-party tool call hooks."""

import copy
import inspect
from typing import Any, Callable, Optional, Union

from loguru import logger

from ..models import HookChainResult, HookContext, read_field, read_reason
from ..params import is_plain_mapping, merge_params
from .models import BeforeToolCallEvent, HookStage, RegisteredHook


class HookRunner:
    """
    Ordered registry of plugin hooks.

    Hooks run in registration order. For before_tool_call the first hook
    that blocks short-circuits the chain; otherwise each hook's params
    patch is shallow-merged over the running params.

    Error policy:
    - catch_errors=False (default): a raising hook aborts the chain and the
      exception propagates to the caller (the gate logs it and fails open)
    - catch_errors=True: the raising hook is logged and skipped
    """

    def __init__(self, catch_errors: bool = False):
        self._catch_errors = catch_errors
        self._hooks: dict[HookStage, list[RegisteredHook]] = {stage: [] for stage in HookStage}

    def register(
        self,
        stage: Union[HookStage, str],
        handler: Callable[..., Any],
        plugin_id: Optional[str] = None,
    ) -> RegisteredHook:
        """Register a hook handler for ``stage``."""
        hook = RegisteredHook(stage=HookStage(stage), handler=handler, plugin_id=plugin_id)
        self._hooks[hook.stage].append(hook)
        logger.debug(f"Registered {hook.stage.value} hook {hook.label}")
        return hook

    def unregister(self, stage: Union[HookStage, str], handler: Callable[..., Any]) -> bool:
        """Remove every registration of ``handler`` for ``stage``."""
        hooks = self._hooks[HookStage(stage)]
        remaining = [hook for hook in hooks if hook.handler is not handler]
        removed = len(remaining) < len(hooks)
        self._hooks[HookStage(stage)] = remaining
        return removed

    def has_hooks(self, stage: Union[HookStage, str]) -> bool:
        """Check whether any hook is registered for ``stage``."""
        try:
            return bool(self._hooks[HookStage(stage)])
        except ValueError:
            return False

    def hooks_for(self, stage: Union[HookStage, str]) -> list[RegisteredHook]:
        """Registered hooks for ``stage`` in execution order."""
        return list(self._hooks[HookStage(stage)])

    async def run_before_tool_call(
        self,
        event: BeforeToolCallEvent,
        ctx: HookContext,
    ) -> Optional[HookChainResult]:
        """
        Run the before_tool_call chain.

        Any truthy ``block`` vetoes the call. Each hook sees a deep copy of
        the running params, so only a returned ``params`` patch can change
        what executes.

        Args:
            event: Canonical tool name and params
            ctx: Caller context

        Returns:
            None when no hooks are registered, otherwise the folded result.
            ``params`` is only set when at least one hook returned a patch.
        """
        hooks = self._hooks[HookStage.BEFORE_TOOL_CALL]
        if not hooks:
            return None

        running = copy.deepcopy(dict(event.params))
        patched = False

        for hook in hooks:
            # Hooks get a private copy. In-place edits are dropped, only returned patches count.
            current = BeforeToolCallEvent(tool_name=event.tool_name, params=copy.deepcopy(running))
            try:
                result = hook.handler(current, ctx)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as e:
                if not self._catch_errors:
                    raise
                logger.warning(f"before_tool_call hook {hook.label} failed: {e}")
                continue

            if result is None:
                continue

            if read_field(result, "block"):
                logger.debug(f"before_tool_call hook {hook.label} blocked {event.tool_name}")
                return HookChainResult(block=True, block_reason=read_reason(result))

            patch = read_field(result, "params")
            if patch is None:
                continue
            if not is_plain_mapping(patch):
                logger.warning(
                    f"before_tool_call hook {hook.label} returned non-mapping params, ignoring"
                )
                continue

            running = merge_params(running, copy.deepcopy(patch))
            patched = True

        return HookChainResult(params=running if patched else None)
