# placementexamen/__main__.py
from __future__ import annotations

import argparse
import logging


def _run_exemple(places_par_banc: int, en_json: bool) -> int:
    from .exemples import construire_exemple

    try:
        construire_exemple(places_par_banc=places_par_banc, en_json=en_json)
    except ValueError as e:
        logging.getLogger("placementexamen").error("%s", e)
        return 2
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="placementexamen",
        description="Outils et exemples pour le placement des examens."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Journalisation DEBUG.")
    sub = parser.add_subparsers(dest="cmd")

    p_ex = sub.add_parser("exemple", help="Exécute le scénario d’exemple.")
    p_ex.add_argument("--places-par-banc", type=int, default=2, choices=(1, 2, 3))
    p_ex.add_argument("--json", action="store_true", help="Affiche le résultat sérialisé.")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # défaut: si aucune sous-commande n’est fournie, on lance l’exemple
    if not args.cmd:
        return _run_exemple(2, False)
    return _run_exemple(args.places_par_banc, args.json)


if __name__ == "__main__":
    raise SystemExit(main())
