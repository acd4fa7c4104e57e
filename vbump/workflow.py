"""Release workflow: fetch → switch → bump → commit → tag → push → merge.

This module orchestrates a version bump:
1. Check that we are inside a git repository
2. Read the current version from the manifest and compute the next one
3. Stop here and print the plan when running dry
4. Fetch, switch to the source branch and pull
5. Write the new version, stage the manifest and commit it
6. Tag the commit
7. Push the source branch (and tags)
8. Pull the source branch into each target branch and push it
9. Switch back to the source branch

The git part is expressed as an ordered list of named steps. The runner
stops at the first failing step. Nothing already done is rolled back: a
commit, tag or branch switch made before the failure stays in place.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from functools import partial

from pydantic import BaseModel

from .errors import NoSourceBranch, NotARepository, VbumpError
from .manifest import get_current_version, update_version
from .models import BumpOptions, ReleasePlan, VersionInfo
from .shell import current_branch, git, is_repository, step
from .versions import calculate_new_version


class Step(BaseModel):
    """One named unit of the release sequence."""

    name: str
    action: Callable[[], object]


def resolve_commit_message(options: BumpOptions, new_version: str) -> str:
    """Pick the commit message: explicit message, else the filled-in template."""
    if options.commit_message:
        return options.commit_message
    return options.commit_message_template.replace("{version}", new_version)


def build_plan(options: BumpOptions, current: str, new_version: str) -> ReleasePlan:
    """Describe what a bump would do without touching anything.

    When no source branch is configured, the checked-out branch is used.

    Raises:
        NoSourceBranch: If nothing is configured and HEAD is detached.
    """
    source = options.source_branch or current_branch()
    if not source:
        raise NoSourceBranch()
    return ReleasePlan(
        current_version=current,
        new_version=new_version,
        source_branch=source,
        target_branches=list(options.target_branches),
        tag=f"{options.tag_prefix}{new_version}" if options.create_tag else None,
        push=not options.skip_push,
        merge=not options.skip_merge and bool(options.target_branches),
    )


def build_steps(options: BumpOptions, plan: ReleasePlan) -> list[Step]:
    """Translate a plan into the ordered list of steps that carry it out."""
    source = plan.source_branch
    manifest = options.manifest_path
    message = resolve_commit_message(options, plan.new_version)

    steps = [
        Step(name="fetch", action=partial(git, "fetch")),
        Step(name=f"switch to {source}", action=partial(git, "switch", source)),
        Step(name=f"pull {source}", action=partial(git, "pull")),
        Step(
            name=f"update {manifest}: {plan.current_version} → {plan.new_version}",
            action=partial(update_version, manifest, plan.new_version),
        ),
        Step(name=f"stage {manifest}", action=partial(git, "add", manifest)),
        Step(name=f"commit: {message}", action=partial(git, "commit", "-m", message)),
    ]

    if plan.tag:
        steps.append(Step(name=f"tag {plan.tag}", action=partial(git, "tag", plan.tag)))

    if plan.push:
        steps.append(
            Step(name=f"push {source}", action=partial(git, "push", "origin", source))
        )
        if plan.tag:
            steps.append(
                Step(name="push tags", action=partial(git, "push", "origin", "--tags"))
            )

    if plan.merge:
        for target in plan.target_branches:
            steps.append(
                Step(name=f"switch to {target}", action=partial(git, "switch", target))
            )
            steps.append(Step(name=f"pull {target}", action=partial(git, "pull")))
            # Integration is a pull of the source ref, not a local merge
            steps.append(
                Step(
                    name=f"merge {source} into {target}",
                    action=partial(git, "pull", "origin", source),
                )
            )
            if plan.push:
                steps.append(
                    Step(
                        name=f"push {target}",
                        action=partial(git, "push", "origin", target),
                    )
                )
        steps.append(
            Step(name=f"switch back to {source}", action=partial(git, "switch", source))
        )

    return steps


def run_steps(steps: list[Step]) -> None:
    """Run steps in order, stopping at the first failure.

    The failing step is named on stderr and its error is re-raised as is.
    """
    total = len(steps)
    for index, s in enumerate(steps, start=1):
        print(f"  [{index}/{total}] {s.name}")
        try:
            s.action()
        except VbumpError:
            print(
                f"  ✗ step '{s.name}' failed; "
                f"{index - 1} completed step(s) were not rolled back",
                file=sys.stderr,
            )
            raise


def bump(options: BumpOptions) -> VersionInfo:
    """Bump the manifest version and run the git release sequence.

    Args:
        options: Effective configuration plus per-invocation flags.

    Returns:
        The old and new version strings. With ``dry_run`` the new version
        is only computed, never written.

    Raises:
        NotARepository: If the working directory is not inside a git repo.
        VbumpError: From any step; earlier steps are left in place.
    """
    if not is_repository():
        raise NotARepository()

    current = get_current_version(options.manifest_path)
    new_version = str(calculate_new_version(current, options.bump_kind))
    plan = build_plan(options, current, new_version)

    if options.dry_run:
        step("Dry run: nothing will be changed")
        for line in plan.describe():
            print(f"  {line}")
        return VersionInfo(old_version=current, new_version=new_version)

    step(f"Releasing {new_version}")
    run_steps(build_steps(options, plan))
    print(f"\n✓ Version bumped successfully: {new_version}")

    return VersionInfo(old_version=current, new_version=new_version)
