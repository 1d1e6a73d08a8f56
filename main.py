import argparse
import logging

from icecream import ic
from pydantic import ValidationError

from core.config import Settings, get_settings


def build_settings(args: argparse.Namespace) -> Settings:
    overrides = {
        "debug": args.debug or None,
        "fetch_seed": args.seed,
        "fetch_failure_rate": args.failure_rate,
        "fetch_delay_unit": args.delay_unit,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if not overrides:
        return get_settings()
    return Settings(**overrides)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="FutureBuilder Demo - lista de usuários com estados assíncronos"
    )
    parser.add_argument(
        "--debug", "-d", action="store_true", help="Ativa logs de debug e o icecream"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Semente da falha simulada (padrão: aleatória)"
    )
    parser.add_argument(
        "--failure-rate",
        type=float,
        default=None,
        help="Probabilidade de erro de conexão em cada carga (padrão: 0.2)",
    )
    parser.add_argument(
        "--delay-unit",
        type=float,
        default=None,
        help="Segundos por unidade de latência simulada (padrão: 1.0)",
    )
    args = parser.parse_args(argv)

    try:
        settings = build_settings(args)
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ic.configureOutput(prefix="🍦 DEBUG | ")
    if settings.debug:
        ic.enable()
    else:
        ic.disable()

    from client.app import ClientApp

    ClientApp(settings).run()


if __name__ == "__main__":
    main()
