from unmirror import unmirror


def main() -> None:
    msg = "Don't let the smoke out!"
    msg_out = unmirror({"type": "string", "value": msg})
    if msg != msg_out:
        raise AssertionError("Smoke test failed")
    print(msg_out)


if __name__ == "__main__":
    main()
