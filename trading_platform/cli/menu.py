"""
Interactive text menu for a trading session.
"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from ..config.settings import TradingConfig
from ..core.exceptions import ConfigurationError
from ..core.models import TradeResult
from ..trading.session import TradingSession

logger = logging.getLogger(__name__)

MENU = """
1. Display Market Data
2. Buy Stock
3. Sell Stock
4. Display Portfolio
5. Update Market Prices
6. Exit"""

EXIT_CHOICE = 6


class TradingMenu:
    """Numbered menu loop that maps console input onto a TradingSession"""

    def __init__(self, session: TradingSession, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self.session = session
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.actions = {
            1: self.display_market,
            2: self.buy_stock,
            3: self.sell_stock,
            4: self.display_portfolio,
            5: self.update_market_prices,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input runs out"""
        while True:
            self._write(MENU)
            choice = self._read_int("Choose an option: ", "Invalid input. Please enter a number: ",
                                   allow_cancel=False)
            if choice is None or choice == EXIT_CHOICE:
                self._write("Exiting...")
                return

            action = self.actions.get(choice)
            if action is None:
                self._write("Invalid option. Please try again.")
                continue
            action()

    def display_market(self) -> None:
        frame = self.session.market.to_frame()
        self._write("Current Market Data:")
        self._write(frame.to_string(index=False, formatters={'price': '${:,.2f}'.format}))

    def buy_stock(self) -> None:
        symbol = self._read_symbol("Enter stock symbol to buy: ")
        if symbol is None:
            return
        quantity = self._read_int("Enter quantity: ", "Invalid input. Please enter an integer: ")
        if quantity is None:
            return
        self._report(self.session.buy(symbol, quantity))

    def sell_stock(self) -> None:
        symbol = self._read_symbol("Enter stock symbol to sell: ")
        if symbol is None:
            return
        quantity = self._read_int("Enter quantity: ", "Invalid input. Please enter an integer: ")
        if quantity is None:
            return
        self._report(self.session.sell(symbol, quantity))

    def display_portfolio(self) -> None:
        valuation = self.session.valuation()
        self._write("Current Portfolio:")
        if valuation.lines:
            frame = valuation.to_frame()
            self._write(frame.to_string(index=False, formatters={
                'price': '${:,.2f}'.format,
                'value': '${:,.2f}'.format,
            }))
        else:
            self._write("No positions held")
        if not valuation.is_complete:
            self._write(f"Warning: no current price for {', '.join(valuation.unavailable)}")
        self._write(f"Cash: ${valuation.cash:,.2f}")
        self._write(f"Total Portfolio Value: ${valuation.total_value:,.2f}")

    def update_market_prices(self) -> None:
        self.session.update_prices()
        self._write("Market prices updated.")

    def _report(self, result: TradeResult) -> None:
        self._write(result.message)

    def _read_symbol(self, prompt: str) -> Optional[str]:
        """Read a symbol; blank input or EOF cancels"""
        line = self._read_line(prompt)
        if line is None or not line.strip():
            return None
        return line.strip()

    def _read_int(self, prompt: str, retry_prompt: str,
                  allow_cancel: bool = True) -> Optional[int]:
        """Read an integer, re-prompting until one is given; EOF (or blank input, if allowed) cancels"""
        line = self._read_line(prompt)
        while line is not None:
            line = line.strip()
            if not line:
                if allow_cancel:
                    return None
                line = self._read_line(retry_prompt)
                continue
            try:
                return int(line)
            except ValueError:
                line = self._read_line(retry_prompt)
        return None

    def _read_line(self, prompt: str) -> Optional[str]:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")


def build_config(args: argparse.Namespace) -> TradingConfig:
    """Resolve configuration from a file or the environment, then apply CLI overrides"""
    config = TradingConfig.from_file(args.config) if args.config else TradingConfig.from_env()
    if args.cash is not None:
        config.initial_cash = args.cash
    if args.seed is not None:
        config.seed = args.seed
    return config.validate()


def main(argv=None) -> int:
    """Console entry point"""
    parser = argparse.ArgumentParser(
        description="Simulated stock trading session with a text menu",
    )
    parser.add_argument('--cash', '-c', type=float, default=None,
                        help='Initial cash balance (default: $10,000)')
    parser.add_argument('--seed', '-s', type=int, default=None,
                        help='Random seed for reproducible price moves')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON trading config file')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable detailed logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = build_config(args)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        TradingMenu(TradingSession.from_config(config)).run()
    except KeyboardInterrupt:
        print("\nExiting...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
