"""
批量分类与汇总

对注册表中的一批 denom 做代币标准分类，输出统计或导出 CSV。
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Union

import pandas as pd
from tqdm import tqdm

from .token_type import TokenType, get_token_type

logger = logging.getLogger(__name__)


def classify_denoms(denoms: Iterable[str]) -> Dict[str, TokenType]:
    """
    批量分类 denom

    Args:
        denoms: denom 列表

    Returns:
        {denom: TokenType}，保持输入顺序
    """
    denoms = list(denoms)

    # 显示进度条当处理超过10个denom时
    if len(denoms) > 10:
        iterator = tqdm(denoms, desc="分类denom", unit="个")
    else:
        iterator = denoms

    results = {}
    for denom in iterator:
        results[denom] = get_token_type(denom)

    return results


def get_token_type_summary(denoms: Iterable[str]) -> Dict[str, int]:
    """
    获取代币标准汇总统计

    Returns:
        {"total": 总数, "<token type>": 数量, ...}
    """
    results = classify_denoms(denoms)

    summary = {"total": len(results)}
    for token_type in TokenType:
        summary[token_type.value] = 0

    for token_type in results.values():
        summary[token_type.value] += 1

    return summary


def export_token_types_csv(
    denoms: Iterable[str],
    output_path: Union[str, Path] = "data/token_types.csv",
) -> bool:
    """
    导出分类结果到CSV

    Args:
        denoms: denom 列表
        output_path: 输出文件路径

    Returns:
        是否成功
    """
    try:
        results = classify_denoms(denoms)

        df = pd.DataFrame(
            [
                {"denom": denom, "token_type": token_type.value}
                for denom, token_type in results.items()
            ],
            columns=["denom", "token_type"],
        )

        # 确保输出目录存在
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)

        df.to_csv(output_file, index=False, encoding="utf-8")

        logger.info(f"✅ 分类结果已导出到: {output_path} (共 {len(df)} 个denom)")
        return True

    except Exception as e:
        logger.error(f"❌ 导出分类结果失败: {e}")
        return False
