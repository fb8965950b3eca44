"""牌组CLI程序.

这个模块提供命令行界面的牌组演示：创建、洗牌、发牌、查询并输出牌组描述。
"""

import logging
from typing import Iterable, Optional

import click

from deck_of_cards import new_deck
from deck_of_cards.core import (
    Card, DeckConfig, DeckConfigError, InvalidCardError, ShuffleAlgorithm, setup_logging,
)
from .render import COLOR_STYLES, CLIRenderer


class DeckCLI:
    """牌组CLI会话.

    持有一副牌组，按命令行参数依次执行操作并输出结果。
    """

    def __init__(self, config: DeckConfig, logger: Optional[logging.Logger] = None):
        """初始化CLI会话.

        Args:
            config: 牌组配置
            logger: 日志记录器
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.deck = new_deck(config)
        self.logger.info("Deck created with %d cards (seed=%s)",
                         self.deck.count(), config.random_seed)

    def deal(self, count: int) -> None:
        """发count张牌，牌组发空后继续请求只会得到空结果."""
        for _ in range(count):
            card = self.deck.deal_one_card()
            if card is None:
                click.echo(CLIRenderer.render_dealt(None, 0))
                self.logger.warning("Requested %d cards but the deck ran out", count)
                break
            click.secho(CLIRenderer.render_dealt(card, self.deck.count()),
                        fg=COLOR_STYLES[card.color])

    def query(self, cards: Iterable[Card]) -> None:
        """逐张查询卡牌是否仍在牌组中."""
        for card in cards:
            click.echo(CLIRenderer.render_contains(card, self.deck.contains(card)))

    def show(self) -> None:
        """输出牌组概要和完整描述."""
        click.echo(CLIRenderer.render_summary(self.deck))
        self.deck.print_description(echo=click.echo)


def _parse_cards(ctx, param, values):
    """click回调: 把--contains参数解析为Card."""
    try:
        return [Card.from_description(value) for value in values]
    except InvalidCardError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducible shuffles.")
@click.option("--shuffle", "shuffles", multiple=True,
              type=click.Choice([a.value for a in ShuffleAlgorithm]),
              help="Extra shuffle to apply after creation; may be repeated.")
@click.option("--deal", "deal_count", type=click.IntRange(min=0), default=0,
              help="Number of cards to deal from the front of the deck.")
@click.option("--contains", "queries", multiple=True, callback=_parse_cards,
              help='Card to look up, e.g. "Ace of Spades"; may be repeated.')
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                                case_sensitive=False),
              help="Logging level (defaults to $DECK_LOG_LEVEL or INFO).")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def main(seed, shuffles, deal_count, queries, log_level, debug):
    """Create, shuffle and deal a standard 52-card deck."""
    try:
        env_config = DeckConfig.from_env()
        config = DeckConfig(
            random_seed=seed if seed is not None else env_config.random_seed,
            log_level=log_level or env_config.log_level,
            debug_mode=debug or env_config.debug_mode,
            shuffles=list(shuffles),
        )
    except DeckConfigError as e:
        raise click.UsageError(str(e))

    setup_logging(config.effective_log_level)

    cli = DeckCLI(config)
    cli.deal(deal_count)
    cli.query(queries)
    cli.show()


if __name__ == "__main__":
    main()
