## Modified By: Callam
## Project: Lotto Estimator
## Purpose of File: Compute the Confidence Score From Weight Entropy
## Description:
## Computes the Shannon entropy of the sampling weight vector,
##     H = -sum(p_i * ln(p_i))   over p_i > 0
## normalizes it by ln(number_count), and reports
##     confidence = max(0, 1 - H_norm) * 100   (2 decimals)
## Near-uniform weights give confidence near 0; a few dominant numbers push it up.

import logging

import numpy as np


def normalized_entropy(weights) -> float:
    """Shannon entropy of `weights` divided by ln(len(weights)), in [0, 1]."""
    p = np.asarray(weights, dtype=float)
    if p.size <= 1:
        return 0.0

    positive = p[p > 0]
    entropy = -np.sum(positive * np.log(positive))
    return float(entropy / np.log(p.size))


def compute_confidence(weights) -> float:
    concentration = max(0.0, 1.0 - normalized_entropy(weights))
    return round(concentration * 100, 2)


def shannon_entropy_features(pipeline):
    """
    Confidence score for the scoring step's weight vector.
    Stores pipeline["confidence_score"].
    """
    weights = pipeline.require("weights")
    confidence = compute_confidence(weights)

    pipeline.add_data("confidence_score", confidence)
    logging.info(f"Confidence score computed: {confidence:.2f}")
