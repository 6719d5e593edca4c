"""
Chaining lookups with Optional instead of None checks.

Run: python examples/lookup_chain.py
"""
from optionalpy import Optional, ConsoleLogger, NoSuchElement


USERS = {"ada": {"email": "ada@example.com"}, "bob": {}}


def find_user(name: str) -> Optional[dict]:
    return Optional.of_nullable(USERS.get(name))


def email_domain(name: str, logger: ConsoleLogger) -> Optional[str]:
    return (
        find_user(name)
        .trace(logger.bind(user=name), "user")
        .map(lambda u: u.get("email"))
        .filter(lambda e: "@" in e)
        .map(lambda e: e.split("@", 1)[1])
    )


def main():
    logger = ConsoleLogger(level="DEBUG")
    for name in ("ada", "bob", "eve"):
        domain = email_domain(name, logger).or_else("<none>")
        print(f"{name} => {domain}")

    # fall back to a second source only when the first is empty
    print("fallback =>", find_user("eve").or_(lambda: find_user("ada")).map(len).get())

    try:
        find_user("eve").or_else_throw(lambda: NoSuchElement("no such user: eve"))
    except NoSuchElement as e:
        print("error =>", e)


if __name__ == "__main__":
    main()
