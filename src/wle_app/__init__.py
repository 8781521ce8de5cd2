"""
Exercise quality report for the Weight Lifting Exercises (WLE) dataset.

Loads the training and quiz tables, splits and cleans the training data,
trains three classifiers, compares their validation accuracy and renders an
HTML report with the winning model's quiz predictions.
"""
