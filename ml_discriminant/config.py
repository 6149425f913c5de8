"""
라이브러리 전역 기본 설정
"""

CONFIG = {
    # 0으로 나누기 방지용 작은 양수
    'epsilon': 1e-8,

    # 출력 수준 (0: 출력 없음)
    'verbose': 0,

    # 시각화
    'figure_dpi': 100,
}
