"""
比赛引擎
Match Engine

三局两胜制的回合/比赛状态机，负责对手随机出拳、胜负判定和累计战绩。
"""
import random
from typing import Optional, List
from dataclasses import dataclass, field
from datetime import datetime
from .move import Move
from .game_rules import GameRules, RoundOutcome, MatchOutcome
from ..state_machine import MatchStage, StageMachine
from ...storage import ScoreStoreBase, ScoreRecord, MemoryScoreStore
from ...utils.exceptions import (
    InvalidMoveException, InvalidStageException, ConfigurationException
)
from ...utils.logger import setup_logger

logger = setup_logger("RPS.MatchEngine")

MOVES = (Move.ROCK, Move.PAPER, Move.SCISSORS)


@dataclass
class RoundResult:
    """回合结果数据类"""
    round_number: int
    player_move: Move
    opponent_move: Move
    outcome: RoundOutcome
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'round_number': self.round_number,
            'player_move': self.player_move.value,
            'opponent_move': self.opponent_move.value,
            'outcome': self.outcome.value,
            'timestamp': self.timestamp.isoformat()
        }


@dataclass
class MatchState:
    """比赛状态（表现层只读）"""
    stage: MatchStage = MatchStage.SELECTING
    round_number: int = 1
    player_round_wins: int = 0
    opponent_round_wins: int = 0
    last_round_outcome: Optional[RoundOutcome] = None
    player_move: Optional[Move] = None
    opponent_move: Optional[Move] = None
    match_outcome: Optional[MatchOutcome] = None
    matches_won: int = 0
    matches_lost: int = 0


class MatchEngine:
    """比赛引擎类"""

    def __init__(self,
                 score_store: Optional[ScoreStoreBase] = None,
                 rng=None,
                 max_rounds: int = 3):
        """
        初始化比赛引擎，并从存储读取累计战绩

        Args:
            score_store: 累计战绩存储，默认使用内存存储
            rng: 随机源，需提供 choice(seq) 方法，默认 random.Random()
            max_rounds: 每场最多回合数（正奇数）

        Raises:
            ConfigurationException: max_rounds 不是正奇数
            StorageException: 读取累计战绩失败
        """
        if isinstance(max_rounds, bool) or not isinstance(max_rounds, int) \
                or max_rounds < 1 or max_rounds % 2 == 0:
            raise ConfigurationException(f"max_rounds 必须是正奇数: {max_rounds!r}",
                                         config_key="game.max_rounds")

        self.max_rounds = max_rounds
        self.wins_needed = max_rounds // 2 + 1
        self.score_store = score_store if score_store is not None else MemoryScoreStore()
        self._rng = rng if rng is not None else random.Random()
        self.stage_machine = StageMachine(initial_stage=MatchStage.SELECTING)
        self.round_history: List[RoundResult] = []

        record = self.score_store.load()
        self.state = MatchState(matches_won=record.matches_won,
                                matches_lost=record.matches_lost)

        logger.info(f"比赛引擎初始化，最多 {max_rounds} 回合，先胜 {self.wins_needed} 回合者赢，"
                    f"累计战绩: 胜 {record.matches_won}, 负 {record.matches_lost}")

    def _set_stage(self, stage: MatchStage):
        self.stage_machine.transition_to(stage)
        self.state.stage = self.stage_machine.get_current_stage()

    def select_move(self, move: Move) -> RoundOutcome:
        """
        玩家出拳，对手随机出拳并判定本回合结果

        Args:
            move: 玩家出拳

        Returns:
            RoundOutcome: 本回合结果

        Raises:
            InvalidMoveException: move 不是 Move
            InvalidStageException: 当前不在 SELECTING 阶段
        """
        if not isinstance(move, Move):
            raise InvalidMoveException(f"出拳必须是 Move: {move!r}", value=move)
        self.stage_machine.require(MatchStage.SELECTING, action="select_move")

        opponent_move = self._rng.choice(MOVES)
        outcome = GameRules.judge(move, opponent_move)

        if outcome == RoundOutcome.WIN:
            self.state.player_round_wins += 1
        elif outcome == RoundOutcome.LOSE:
            self.state.opponent_round_wins += 1

        self.state.player_move = move
        self.state.opponent_move = opponent_move
        self.state.last_round_outcome = outcome
        self.round_history.append(RoundResult(
            round_number=self.state.round_number,
            player_move=move,
            opponent_move=opponent_move,
            outcome=outcome
        ))
        self._set_stage(MatchStage.REVEALED)

        logger.info(f"回合 {self.state.round_number}: 玩家={move}, 对手={opponent_move}, "
                    f"结果={outcome.value}, 比分 {self.state.player_round_wins}-"
                    f"{self.state.opponent_round_wins}")
        return outcome

    def is_match_decided(self) -> bool:
        """一方达到获胜回合数，或最后一回合分出胜负"""
        return (self.state.player_round_wins == self.wins_needed
                or self.state.opponent_round_wins == self.wins_needed
                or (self.state.round_number == self.max_rounds
                    and self.state.last_round_outcome is not None
                    and self.state.last_round_outcome != RoundOutcome.DRAW))

    def advance(self) -> MatchStage:
        """
        结果揭晓后继续：平局重赛同一回合，比赛已分胜负则结束，否则进入下一回合

        Returns:
            MatchStage: 推进后的阶段

        Raises:
            InvalidStageException: 当前不在 REVEALED 阶段
        """
        self.stage_machine.require(MatchStage.REVEALED, action="advance")

        if self.state.last_round_outcome == RoundOutcome.DRAW:
            logger.info(f"平局，重赛第 {self.state.round_number} 回合")
            self._set_stage(MatchStage.SELECTING)
        elif self.is_match_decided():
            self.finish_match()
        elif self.state.round_number < self.max_rounds:
            self.state.round_number += 1
            logger.info(f"进入第 {self.state.round_number}/{self.max_rounds} 回合")
            self._set_stage(MatchStage.SELECTING)
        else:
            self.finish_match()

        return self.state.stage

    def finish_match(self) -> MatchOutcome:
        """
        结束比赛，累计战绩加一并保存

        Returns:
            MatchOutcome: 比赛结果

        Raises:
            InvalidStageException: 当前不在 REVEALED 阶段，或比赛尚未分出胜负
            StorageException: 保存累计战绩失败
        """
        self.stage_machine.require(MatchStage.REVEALED, action="finish_match")
        if not self.is_match_decided():
            logger.warning("比赛尚未分出胜负，不能结束")
            raise InvalidStageException(
                "finish_match 只能在比赛分出胜负后调用",
                game_state=str(self.state.stage),
                expected=(str(MatchStage.REVEALED),)
            )

        if self.state.player_round_wins > self.state.opponent_round_wins:
            outcome = MatchOutcome.PLAYER_WINS
            self.state.matches_won += 1
        else:
            outcome = MatchOutcome.OPPONENT_WINS
            self.state.matches_lost += 1

        self.state.match_outcome = outcome
        self._set_stage(MatchStage.MATCH_OVER)

        logger.info(f"比赛结束: {outcome.label} 最终比分 {self.state.player_round_wins}-"
                    f"{self.state.opponent_round_wins}，累计战绩: 胜 {self.state.matches_won}, "
                    f"负 {self.state.matches_lost}")

        self.score_store.save(self.get_score_record())
        return outcome

    def reset_match(self, hard: bool = False):
        """
        重置比赛

        Args:
            hard: 是否同时清零累计战绩

        Raises:
            StorageException: 清零后保存失败
        """
        self.state.round_number = 1
        self.state.player_round_wins = 0
        self.state.opponent_round_wins = 0
        self.state.last_round_outcome = None
        self.state.player_move = None
        self.state.opponent_move = None
        self.state.match_outcome = None
        self.round_history.clear()
        self.stage_machine.reset(MatchStage.SELECTING)
        self.state.stage = self.stage_machine.get_current_stage()

        if hard:
            self.state.matches_won = 0
            self.state.matches_lost = 0
            logger.info("比赛与累计战绩已清零")
            self.score_store.save(self.get_score_record())
        else:
            logger.info("比赛已重置")

    def get_state(self) -> MatchState:
        """获取比赛状态"""
        return self.state

    def get_stage(self) -> MatchStage:
        """获取当前阶段"""
        return self.state.stage

    def get_score_record(self) -> ScoreRecord:
        """获取累计战绩"""
        return ScoreRecord(self.state.matches_won, self.state.matches_lost)

    def get_round_history(self) -> List[RoundResult]:
        """获取本场回合历史"""
        return self.round_history.copy()

    def get_last_round_result(self) -> Optional[RoundResult]:
        """获取上一回合结果"""
        if self.round_history:
            return self.round_history[-1]
        return None
