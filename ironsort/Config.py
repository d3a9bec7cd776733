DEFAULT_PARTITION = "hoare"
DEFAULT_PIVOT = "middle"

SAMPLE_SEED = 20240229
SAMPLES_PER_N = 200
MAX_SAMPLE_TIME_MS = 2000
FEW_UNIQUE_VALUES = 4
