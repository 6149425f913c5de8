import matplotlib

# 테스트 환경에는 디스플레이가 없음
matplotlib.use('Agg')
