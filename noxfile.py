import shutil

import nox

if shutil.which("uv"):
    nox.options.default_venv_backend = "uv"

nox.options.error_on_external_run = True

python_versions = ["3.11", "3.12", "3.13"]


@nox.session(python=python_versions)
def tests(session):
    session.install("-e", ".[test]")
    session.run("pytest", "-vv")
    session.run("samtid", success_codes=[1], silent=True)
    session.run("samtid", "--help", silent=True)
    session.run("samtid", "-c", "true", "false", success_codes=[1], silent=True)


@nox.session(python=python_versions[-1])
def mypy(session):
    session.install("mypy", ".")
    session.run(
        "mypy",
        "--no-warn-no-return",
        "--check-untyped-defs",
        "--pretty",
        "src/samtid",
    )
