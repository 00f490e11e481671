import subprocess


def get_version_commit() -> str:
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short=8", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .split()[0]
            .decode()
        )
    except Exception:
        return "dev"
