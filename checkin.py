#!/usr/bin/env python3
"""
Check-in diario de moedas da Shopee.

Uso:
    python checkin.py --cookie "SPC_EC=...; shopee_webUnique_ccd=..."
    python checkin.py --historico
    python checkin.py --help
"""

import argparse
import asyncio
import os
import sys

from shopee_lib import NO_REWARD, ShopeeClient, ShopeeError
from shopee_lib.config import COOKIE_ENV_VAR


async def executar(args, cookie: str) -> int:
    async with ShopeeClient(cookie, debug=args.debug) as shopee:
        try:
            if not args.sem_usuario:
                print(f"Usuario: {await shopee.get_login_user()}")

            if not args.sem_checkin:
                resultado = await shopee.checkin()
                if resultado is NO_REWARD:
                    print("Check-in sem recompensa (ja feito hoje?)")
                else:
                    print(f"✓ Check-in feito: +{resultado} moedas")

            if not args.sem_saldo:
                print(f"Saldo: {await shopee.get_balance()} moedas")

            if args.historico:
                historico = await shopee.get_checkin_history()
                print("\n=== HISTORICO (7 DIAS) ===")
                for i, moedas in enumerate(historico.amounts):
                    marca = " <- hoje" if i == historico.today_index else ""
                    print(f"  Dia {i + 1}: {moedas}{marca}")
                print(f"  Check-in hoje: {'sim' if historico.checked_in_today else 'nao'}")
        except ShopeeError as e:
            print(f"Erro ({e.kind.value}): {e}")
            return 1
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Check-in diario de moedas da Shopee",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Por padrao: mostra o usuario logado, faz o check-in e mostra o saldo.

Exemplos:
  python checkin.py
  python checkin.py --cookie "SPC_EC=...; shopee_webUnique_ccd=..."
  python checkin.py --sem-checkin --historico

Sem --cookie, o cookie e lido de {COOKIE_ENV_VAR} (ou do arquivo .env).
        """
    )

    parser.add_argument("-c", "--cookie", type=str, help="Header Cookie copiado do navegador")

    # Etapas padrao
    parser.add_argument("--sem-usuario", action="store_true", help="Nao mostrar usuario logado")
    parser.add_argument("--sem-checkin", action="store_true", help="Nao fazer check-in")
    parser.add_argument("--sem-saldo", action="store_true", help="Nao mostrar saldo de moedas")

    # Consultas extras
    parser.add_argument("--historico", action="store_true", help="Mostrar historico de 7 dias")

    # Debug
    parser.add_argument("--debug", action="store_true", help="Modo debug")

    args = parser.parse_args()

    cookie = args.cookie or os.getenv(COOKIE_ENV_VAR)
    if not cookie:
        print("Cookie nao informado!")
        print(f"Use --cookie ou defina {COOKIE_ENV_VAR} no arquivo .env")
        sys.exit(2)

    sys.exit(asyncio.run(executar(args, cookie)))


if __name__ == "__main__":
    main()
