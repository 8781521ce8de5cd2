"""
Reusable machine-learning building blocks for the exercise quality report.

Structure:
- core: configuration, logging, file handling and error handling.
- framework: data access and result data classes.
- preprocessing: train/validation splitting and column cleaning.
- model_testing: trainers, evaluation and model selection.
- visualization: exploratory analysis and chart creation.
"""
