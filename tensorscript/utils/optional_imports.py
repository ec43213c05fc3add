def ensure_torch():
    try:
        import torch
    except ImportError as exc:
        msg = "torch is required. Please install torch to continue."
        raise ImportError(msg) from exc
    return torch


def check_torch():
    try:
        import torch
    except ImportError:
        return None
    return torch


def ensure_tensorflow():
    try:
        import tensorflow as tf
    except ImportError as exc:
        msg = "tensorflow is required. Please install tensorflow to continue."
        raise ImportError(msg) from exc
    return tf


def check_tensorflow():
    try:
        import tensorflow as tf
    except ImportError:
        return None
    return tf


def ensure_joblib():
    try:
        import joblib
    except ImportError as exc:
        msg = "joblib is required. Please install scikit-learn and joblib to continue."
        raise ImportError(msg) from exc
    return joblib


def ensure_sklearn():
    try:
        import sklearn
    except ImportError as exc:
        msg = "scikit-learn is required. Please install scikit-learn to continue."
        raise ImportError(msg) from exc
    return sklearn


def check_sklearn():
    try:
        import sklearn.base
    except ImportError:
        return None
    return sklearn
