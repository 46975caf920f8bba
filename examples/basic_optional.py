"""
Basic optionals: lookups, transformation chains, and fallbacks.

Run: python examples/basic_optional.py
"""
from optionalpy import Optional, NoValuePresentError


USERS = {"ada": {"email": "ada@example.com"}, "bob": {}}


def find_user(name: str) -> Optional[dict]:
    return Optional.of_nullable(USERS.get(name))


def main():
    # Present values flow through map/filter
    email = (
        find_user("ada")
        .map(lambda u: u.get("email"))
        .filter(lambda e: e.endswith("@example.com"))
        .map(str.upper)
    )
    print("ada =>", email)                                  # Optional[ADA@EXAMPLE.COM]

    # A mapper returning None collapses to empty
    print("bob =>", find_user("bob").map(lambda u: u.get("email")))   # Optional.empty

    # Fallbacks
    print("eve =>", find_user("eve").or_else({"email": "nobody"}))
    try:
        find_user("eve").or_else_throw_error("no such user: eve")
    except NoValuePresentError as e:
        print("error =>", e)


if __name__ == "__main__":
    main()
