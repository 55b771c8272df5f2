"""Example: the spreadsheet functions against the demo environment.

Needs EXANTE_API_TOKEN in the environment (or a .env file).
"""

from exante_md.sheets import (
    exante_crossrates,
    exante_group,
    exante_group_nearest,
    exante_mid,
    exante_ohlc,
    exante_symbol,
    exante_update,
)


def main():
    symbol = "EUR/USD.E.FX"
    print(f"\n{'=' * 60}")
    print(f"{symbol} (60s bar)")
    print(f"{'=' * 60}")
    for what in ("open", "high", "low", "close"):
        print(f"  {what:<6} {exante_ohlc(symbol, 60, what)}")
    print(f"  mid    {exante_mid(symbol)}")

    print(f"\n  AAPL.NASDAQ description: {exante_symbol('AAPL.NASDAQ', 'description')}")
    print(f"  AAPL.NASDAQ lot size:    {exante_symbol('AAPL.NASDAQ', 'lotSize')}")
    print(f"  Si group name:           {exante_group('Si', 'name')}")
    print(f"  Si nearest id:           {exante_group_nearest('Si', 'id')}")
    print(f"  EUR -> USD:              {exante_crossrates('EUR', 'USD')}")

    print(f"\n  Updated at {exante_update()}")


if __name__ == "__main__":
    main()
