"""Rules configuration schema"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class RulesConfig(BaseModel):
    """Engine parameters; one instance is carried by every game state"""

    model_config = ConfigDict(frozen=True)

    board_size: int = Field(15, ge=12, le=19, description="Board edge length")
    win_threshold: int = Field(4, ge=1, description="Score that ends the game")
    min_shape_size: int = Field(6, ge=2, description="Smallest symmetric shape that scores")


def load_rules(cfg: Dict[str, Any]) -> RulesConfig:
    """Build RulesConfig from the `[rules]` table of a parsed config file"""
    return RulesConfig(**(cfg.get("rules", {}) or {}))
