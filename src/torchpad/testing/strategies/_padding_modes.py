import hypothesis.strategies

padding_modes = hypothesis.strategies.sampled_from(
    ["constant", "edge", "reflect"]
)
