from .cli import app


def main() -> None:
    app(prog_name="cnpjkit")


if __name__ == "__main__":
    main()
