"""
应用程序主类
Application Main Class
"""
import random
from pathlib import Path
from typing import Optional, Callable, Dict, Any
from .game import MatchController, MatchEngine, MatchStage, MatchView
from .storage import ScoreStoreBase, MemoryScoreStore, StoreFactory
from .utils.logger import setup_logger, configure_logging
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import GameException, StorageException, ConfigurationException

logger = setup_logger("RPS.App")

DEFAULT_CONFIG_PATH = Path("config") / "config.yaml"

HELP_TEXT = "命令: r/p/s 出拳, n 下一回合, f 结果, a 再来一局, x 清零战绩, q 退出"


class Application:
    """应用程序主类"""

    def __init__(self, config_path: Optional[str] = None):
        """
        初始化应用程序

        Args:
            config_path: 配置文件路径，默认为当前工作目录下的 config/config.yaml
        """
        self.config_path = str(config_path or DEFAULT_CONFIG_PATH)
        self.config: Dict[str, Any] = {}

        self.score_store: Optional[ScoreStoreBase] = None
        self.engine: Optional[MatchEngine] = None
        self.controller: Optional[MatchController] = None

        self.is_running = False
        self.should_exit = False

    def initialize(self) -> bool:
        """
        初始化所有组件

        Returns:
            bool: 初始化是否成功
        """
        if not self._load_config():
            return False

        configure_logging(ConfigLoader.get_logging_config(self.config))

        if not self._initialize_engine():
            return False

        self.controller = MatchController(self.engine)
        self.controller.on_round_result = self._on_round_result
        self.controller.on_match_over = self._on_match_over

        logger.info("应用程序初始化成功")
        return True

    def _load_config(self) -> bool:
        """加载配置文件，文件不存在时使用默认配置"""
        try:
            self.config = ConfigLoader.load_config(self.config_path)
            return True
        except FileNotFoundError:
            logger.warning(f"配置文件不存在，使用默认配置: {self.config_path}")
            self.config = {}
            return True
        except ConfigurationException as e:
            global_error_handler.handle(e, "加载配置")
            return False
        except Exception as e:
            global_error_handler.handle(ConfigurationException(str(e)), "加载配置")
            return False

    def _initialize_engine(self) -> bool:
        """按配置创建战绩存储和比赛引擎"""
        game_config = ConfigLoader.get_game_config(self.config)
        storage_config = ConfigLoader.get_storage_config(self.config)

        seed = game_config.get('seed')
        rng = random.Random(seed) if seed is not None else None

        try:
            self.score_store = StoreFactory.create_from_config(storage_config)
            self.engine = MatchEngine(score_store=self.score_store, rng=rng,
                                      max_rounds=game_config.get('max_rounds', 3))
        except ConfigurationException as e:
            global_error_handler.handle(e, "初始化比赛引擎")
            return False
        except StorageException as e:
            global_error_handler.handle(e, "读取累计战绩")
            logger.warning("累计战绩读取失败，本次运行改用内存存储，战绩不会保存")
            self.score_store = MemoryScoreStore()
            self.engine = MatchEngine(score_store=self.score_store, rng=rng,
                                      max_rounds=game_config.get('max_rounds', 3))

        return True

    def _on_round_result(self, round_result):
        """回合结果回调"""
        logger.debug(f"回合结果: {round_result.to_dict()}")

    def _on_match_over(self, outcome, record):
        """比赛结束回调"""
        logger.info(f"{outcome.label} 累计: 胜 {record.matches_won}, 负 {record.matches_lost}, "
                    f"胜率 {record.get_win_rate():.2%}")

    def render(self, view: MatchView) -> str:
        """
        把比赛快照渲染为文本

        Args:
            view: 比赛快照

        Returns:
            str: 多行文本
        """
        lines = [
            f"🏆 {view.matches_won}    💀 {view.matches_lost}",
            f"Round {view.round_number}/{view.max_rounds}",
        ]

        if view.stage == MatchStage.SELECTING:
            lines.append("Choose Your Weapon!  [r] ✊  [p] ✋  [s] ✌️    [x] Reset")
        elif view.stage == MatchStage.REVEALED:
            lines.append(f"You {view.player_move.symbol}  vs  {view.opponent_move.symbol} CPU")
            lines.append(view.last_round_outcome.label)
            lines.append(f"You {view.player_round_wins} | {view.opponent_round_wins} CPU")
            lines.append("[f] Result" if view.can_finish else "[n] Next")
        else:
            lines.append(view.match_outcome.label)
            lines.append(f"Final: {view.player_round_wins} - {view.opponent_round_wins}")
            lines.append("[a] Play Again")

        return "\n".join(lines)

    def handle_command(self, command: str) -> str:
        """
        执行一条控制台命令

        Args:
            command: 用户输入

        Returns:
            str: 给用户的提示，空字符串表示正常执行
        """
        view = self.controller.get_view()
        actions = {
            'n': ('can_advance', self.controller.next_round),
            'f': ('can_finish', self.controller.show_result),
            'a': ('can_play_again', self.controller.play_again),
            'x': ('can_reset', self.controller.reset_all),
        }

        key = command.strip().lower()
        if key in ('h', 'help', '?'):
            return HELP_TEXT

        if key in actions:
            flag, action = actions[key]
            if not getattr(view, flag):
                return "当前阶段不能执行该操作"
            action()
            return ""

        if not view.can_select:
            return "当前阶段不能出拳"
        self.controller.choose(key)
        return ""

    def run(self,
            input_func: Callable[[str], str] = input,
            output_func: Callable[[str], None] = print):
        """
        运行控制台主循环

        Args:
            input_func: 读取一行输入
            output_func: 输出一段文本
        """
        if not self.is_running:
            logger.error("应用程序未初始化，无法运行")
            return

        output_func(HELP_TEXT)

        try:
            while not self.should_exit:
                output_func(self.render(self.controller.get_view()))
                command = input_func("> ")

                if command.strip().lower() in ('q', 'quit', 'exit'):
                    self.should_exit = True
                    break

                try:
                    message = self.handle_command(command)
                except (GameException, StorageException) as e:
                    global_error_handler.handle(e, f"命令 {command!r}")
                    message = e.message

                if message:
                    output_func(message)

        except (EOFError, KeyboardInterrupt):
            logger.info("输入结束，退出")
        finally:
            self.is_running = False
            logger.info("应用程序已退出")

    def start(self, **run_kwargs) -> bool:
        """
        初始化并启动应用程序

        Returns:
            bool: 启动是否成功
        """
        if not self.initialize():
            logger.error("应用程序启动失败")
            return False

        self.is_running = True
        self.run(**run_kwargs)
        return True
