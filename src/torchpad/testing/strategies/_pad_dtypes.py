import hypothesis.strategies
import torch

pad_dtypes = hypothesis.strategies.sampled_from(
    [
        torch.bool,
        torch.int8,
        torch.int32,
        torch.int64,
        torch.uint8,
        torch.float32,
        torch.float64,
    ]
)
