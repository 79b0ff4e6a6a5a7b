"""Create a prefixed branch from free-text input.

Pipeline: repository check -> prefix -> base text -> sanitized candidate ->
existing-name snapshot -> first free name -> create and switch.
Nothing is mutated before the final create call, so any earlier failure
leaves the repository untouched.
"""

import logging
from collections.abc import Sequence

from gnb.core.collision import collect_existing_branches, pick_available_name
from gnb.core.context import GnbContext
from gnb.core.errors import EnvironmentSetupError
from gnb.core.naming import build_base_name, build_candidate
from gnb.core.prefix import resolve_prefix

logger = logging.getLogger(__name__)


def plan_branch_name(ctx: GnbContext, name_parts: Sequence[str]) -> str:
    """Work out the branch name gnb would create, without creating it.

    Args:
        ctx: Application context
        name_parts: Words given on the command line (may be empty)

    Returns:
        Collision-free target branch name

    Raises:
        EnvironmentSetupError: If not inside a git repository or the username
            cannot be determined
        PrefixValidationError: If the prefix sanitizes to nothing
        BranchNamesExhaustedError: If all 100 name slots are taken
        GatewayError: If listing branches fails
    """
    if not ctx.git.is_inside_work_tree(ctx.cwd):
        raise EnvironmentSetupError("Not inside a git repository")

    prefix = resolve_prefix(ctx.config.prefix_override, ctx.identity)

    now = ctx.time.now()
    base = build_base_name(name_parts, now=now)
    candidate = build_candidate(prefix, base, now=now)
    logger.debug("Candidate branch: base=%r, candidate=%s", base, candidate)

    existing = collect_existing_branches(ctx.git, ctx.cwd, candidate)
    return pick_available_name(candidate, existing)


def create_prefixed_branch(ctx: GnbContext, name_parts: Sequence[str]) -> str:
    """Create and switch to a new prefixed branch.

    Args:
        ctx: Application context
        name_parts: Words given on the command line (may be empty)

    Returns:
        Name of the branch that was created (or would be, in dry-run mode)

    Raises:
        GnbError: Any failure from plan_branch_name(), or BranchCreationError
            if git cannot create the branch
    """
    target = plan_branch_name(ctx, name_parts)
    logger.debug("Creating branch %s (dry_run=%s)", target, ctx.dry_run)
    ctx.git.create_and_switch_branch(ctx.cwd, target)
    return target
