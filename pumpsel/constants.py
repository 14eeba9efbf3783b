# pumpsel/constants.py
"""Значения по умолчанию, общие для всех модулей пакета."""

# --- генерация кривых ---
DEFAULT_SAMPLES = 80          # число точек по расходу
MIN_SAMPLES = 80
MAX_SAMPLES = 150

# --- пороги проверки рабочей точки (доли) ---
FLOW_FAR_MARGIN = 0.30        # Q > Qmax·(1 + margin) → «далеко за диапазоном»
LOW_FLOW_FRACTION = 0.05      # 0 < Q < 5 % Qmax → «слишком малый расход»
HEAD_FAR_MARGIN = 0.30
LOW_HEAD_FRACTION = 0.05
HEAD_TOLERANCE_FRACTION = 0.15
HEAD_TOLERANCE_MIN = 3.0      # м
LOW_EFFICIENCY_FRACTION = 0.70

# --- подписи столбцов DataFrame ---
COL_FLOW = "Q, м³/ч"
COL_HEAD = "H, м"
COL_POWER = "N, CV"
COL_NPSH = "NPSH, м"
COL_EFFICIENCY = "η, %"
COL_USER_HEAD = "H_зад, м"
COL_VERDICT = "Статус"
COL_WARNINGS = "Предупреждения"
