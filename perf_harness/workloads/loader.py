r"""
Loading workloads from a Python module.

A workload module defines a hook that registers its workloads:

    def register_workloads(registry, config):
        registry.register("df_line_count", lambda: count_lines(config.data_path))
"""

import importlib
import logging

from perf_harness.config import HarnessConfig
from perf_harness.errors import HarnessError, WorkloadModuleError
from perf_harness.workloads.base import WorkloadRegistry

__all__ = ["REGISTER_HOOK", "load_workload_module"]

logger = logging.getLogger(__name__)

REGISTER_HOOK = "register_workloads"


def load_workload_module(module_name: str, registry: WorkloadRegistry, config: HarnessConfig) -> int:
    """Import a workload module and run its registration hook.

    Args:
        module_name: Dotted module path.
        registry: Registry the module registers into.
        config: Parsed harness arguments passed to the hook.

    Returns:
        Number of workloads the module registered.

    Raises:
        WorkloadModuleError: If the module cannot be imported, has no hook,
            or the hook fails.
        DuplicateNameError: If the hook registers a name twice.
    """
    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        msg = f"Cannot import workload module '{module_name}': {e}"
        raise WorkloadModuleError(msg, name=module_name) from e

    hook = getattr(module, REGISTER_HOOK, None)
    if not callable(hook):
        msg = f"Workload module '{module_name}' does not define {REGISTER_HOOK}(registry, config)"
        raise WorkloadModuleError(msg, name=module_name)

    before = len(registry)
    try:
        hook(registry, config)
    except HarnessError:
        raise
    except Exception as e:
        msg = f"{REGISTER_HOOK} in '{module_name}' failed: {type(e).__name__}: {e}"
        raise WorkloadModuleError(msg, name=module_name) from e
    added = len(registry) - before
    logger.debug("Loaded %d workload(s) from %s", added, module_name)
    return added
