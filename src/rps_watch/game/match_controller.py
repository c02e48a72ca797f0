"""
比赛控制器
Match Controller - 表现层与比赛引擎之间的边界
"""
from dataclasses import dataclass
from typing import Optional, Callable, Union
from .state_machine import MatchStage
from .game_logic import MatchEngine, Move, RoundOutcome, MatchOutcome, RoundResult
from ..utils.logger import setup_logger

logger = setup_logger("RPS.MatchController")


@dataclass(frozen=True)
class MatchView:
    """表现层渲染所需的只读快照"""
    stage: MatchStage
    round_number: int
    max_rounds: int
    player_round_wins: int
    opponent_round_wins: int
    last_round_outcome: Optional[RoundOutcome]
    player_move: Optional[Move]
    opponent_move: Optional[Move]
    match_outcome: Optional[MatchOutcome]
    matches_won: int
    matches_lost: int
    can_select: bool
    can_advance: bool
    can_finish: bool
    can_play_again: bool
    can_reset: bool


class MatchController:
    """比赛控制器类，把界面按钮映射为引擎操作并通知回调"""

    def __init__(self, engine: MatchEngine):
        """
        初始化比赛控制器

        Args:
            engine: 比赛引擎
        """
        self.engine = engine

        # 回调函数
        self.on_stage_changed: Optional[Callable[[MatchStage], None]] = None
        self.on_round_result: Optional[Callable[[RoundResult], None]] = None
        self.on_match_over: Optional[Callable] = None

        logger.info("比赛控制器初始化完成")

    def get_view(self) -> MatchView:
        """
        生成当前比赛快照

        按钮可用性与表盘底栏一致：出拳阶段可出拳或清零战绩，
        揭晓阶段已分胜负时显示"结果"否则显示"下一回合"，结束阶段可再来一局。
        """
        state = self.engine.get_state()
        stage = state.stage
        revealed = stage == MatchStage.REVEALED
        decided = revealed and self.engine.is_match_decided()

        return MatchView(
            stage=stage,
            round_number=state.round_number,
            max_rounds=self.engine.max_rounds,
            player_round_wins=state.player_round_wins,
            opponent_round_wins=state.opponent_round_wins,
            last_round_outcome=state.last_round_outcome,
            player_move=state.player_move,
            opponent_move=state.opponent_move,
            match_outcome=state.match_outcome,
            matches_won=state.matches_won,
            matches_lost=state.matches_lost,
            can_select=stage == MatchStage.SELECTING,
            can_advance=revealed and not decided,
            can_finish=decided,
            can_play_again=stage == MatchStage.MATCH_OVER,
            can_reset=stage == MatchStage.SELECTING
        )

    def choose(self, move: Union[Move, str]) -> RoundResult:
        """
        玩家出拳

        Args:
            move: 出拳，可以是 Move 或字符串（rock / r / ✊ 等）

        Returns:
            RoundResult: 本回合结果
        """
        if not isinstance(move, Move):
            move = Move.from_string(move)

        self.engine.select_move(move)
        round_result = self.engine.get_last_round_result()

        if self.on_round_result:
            try:
                self.on_round_result(round_result)
            except Exception as e:
                logger.error(f"回合结果回调异常: {e}")

        self._notify_stage_changed()
        return round_result

    def next_round(self) -> MatchStage:
        """
        下一回合（平局时重赛本回合，已分胜负时结束比赛）

        保存战绩失败时异常照常抛出，但阶段已改变，回调仍会收到通知。
        """
        previous_stage = self.engine.get_stage()
        try:
            return self.engine.advance()
        finally:
            self._notify_if_stage_moved(previous_stage)

    def show_result(self) -> MatchOutcome:
        """结束已分胜负的比赛"""
        previous_stage = self.engine.get_stage()
        try:
            return self.engine.finish_match()
        finally:
            self._notify_if_stage_moved(previous_stage)

    def play_again(self):
        """再来一局，保留累计战绩"""
        self.engine.reset_match(hard=False)
        self._notify_stage_changed()

    def reset_all(self):
        """重置比赛并清零累计战绩"""
        try:
            self.engine.reset_match(hard=True)
        finally:
            self._notify_stage_changed()

    def _notify_if_stage_moved(self, previous_stage: MatchStage):
        """阶段确实改变时通知回调；进入 MATCH_OVER 时同时通知比赛结束"""
        stage = self.engine.get_stage()
        if stage == previous_stage:
            return
        self._notify_stage_changed()
        if stage == MatchStage.MATCH_OVER:
            self._notify_match_over()

    def _notify_stage_changed(self):
        """通知阶段改变"""
        if self.on_stage_changed:
            try:
                self.on_stage_changed(self.engine.get_stage())
            except Exception as e:
                logger.error(f"阶段改变回调异常: {e}")

    def _notify_match_over(self):
        """通知比赛结束"""
        if self.on_match_over:
            try:
                self.on_match_over(self.engine.get_state().match_outcome,
                                   self.engine.get_score_record())
            except Exception as e:
                logger.error(f"比赛结束回调异常: {e}")
