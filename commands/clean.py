import subprocess
import sys

TARGETS = ["wireframe_converter", "tests", "cli.py", "commands"]


def _run_step(name: str, target: str, cmd: list[str], failures: list[str]) -> bool:
    result = subprocess.run(cmd, stdout=subprocess.DEVNULL)
    if result.returncode != 0:
        failures.append(f"{target}: {name} failed")
        return False
    return True


def clean() -> None:
    """Run formatters and the type checker over the package, tests and cli"""
    failures: list[str] = []
    successes: list[str] = []

    for target in TARGETS:
        print(f"\n{'='*60}")
        print(f"Processing {target}...")
        print(f"{'='*60}")

        print(f"🧹 Formatting {target}...")
        steps = [
            (
                "autoflake",
                [
                    "autoflake",
                    "--remove-all-unused-imports",
                    "--remove-unused-variables",
                    "--recursive",
                    target,
                    "-i",
                    "--exclude=__init__.py",
                ],
            ),
            ("isort", ["isort", target, "--profile", "black"]),
            ("black", ["black", target]),
        ]
        ok = all([_run_step(name, target, cmd, failures) for name, cmd in steps])

        if target != "tests":
            print(f"🔍 Type checking {target}...")
            ok = _run_step("mypy", target, ["mypy", target], failures) and ok

        if ok:
            successes.append(target)

    print(f"\n{'='*60}")
    print("📊 SUMMARY")
    print(f"{'='*60}")
    print(f"✅ Successful: {len(successes)}")
    for item in successes:
        print(f"   ✓ {item}")

    if failures:
        print(f"\n❌ Failed: {len(failures)}")
        for failure in failures:
            print(f"   ✗ {failure}")

    print(f"\n{'='*60}")
    if failures:
        print("❌ Code quality checks FAILED")
        print(f"{'='*60}")
        sys.exit(1)
    else:
        print("✅ All code quality checks PASSED")
        print(f"{'='*60}")
        sys.exit(0)
