"""
Entry point for the exercise quality report.

    exercise-quality-report [--config-dir DIR]
    python -m wle_app.main [--config-dir DIR]
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from wle_framework.core.error_handling.error_handler import ConfigurationError, ErrorHandler

from .di_container import create_container
from .reporting.report_content import ReportContent


def run_pipeline(config,
                 data_access,
                 data_validator,
                 data_splitter,
                 data_cleaner,
                 correlation_explorer,
                 model_tester,
                 model_selector,
                 chart_orchestrator,
                 quiz_predictor,
                 report_builder,
                 app_logger) -> ReportContent:
    """Run every stage once, in order, and return what went into the report."""

    # Load and validate data
    training_data = data_access.load_training_data()
    quiz_data = data_access.load_quiz_data()

    data_validator.validate_training_data(training_data)
    data_validator.validate_quiz_data(quiz_data)

    app_logger.structured_log(
        logging.INFO,
        "Data loaded and validated",
        training_shape=training_data.shape,
        quiz_shape=quiz_data.shape
    )

    # Split, then learn the column selection from the training subset only
    train_data, validation_data = data_splitter.split(training_data)
    clean_train, cleaning_results = data_cleaner.fit_transform(train_data)
    clean_validation = data_cleaner.transform(validation_data)

    X_train, y_train = model_tester.prepare_features(clean_train)
    X_val, y_val = model_tester.prepare_features(clean_validation)

    # Exploration
    correlation_options = getattr(config.core.chart_options, 'correlation', None)
    corr = correlation_explorer.correlation_matrix(
        X_train, method=getattr(correlation_options, 'method', 'pearson')
    )
    high_correlation_pairs = correlation_explorer.high_correlation_pairs(
        corr, threshold=getattr(correlation_options, 'threshold', 0.8)
    )
    app_logger.structured_log(
        logging.INFO,
        "Highly correlated feature pairs found",
        n_pairs=len(high_correlation_pairs)
    )

    # Train, score, rank
    results_by_model = model_tester.train_all(X_train, y_train)
    results_by_model = model_tester.evaluate_all(results_by_model, X_val, y_val)

    ranking = model_selector.ranking_table(results_by_model)
    best_model = model_selector.select_best(results_by_model)

    # Outputs
    output_dir = Path(config.output_directory)
    quiz_predictions = quiz_predictor.predict(quiz_data, best_model)
    quiz_predictions_path = quiz_predictor.save(quiz_predictions, output_dir)

    charts_directory = getattr(getattr(config.core, 'report_config', None), 'charts_directory', 'charts')
    charts = chart_orchestrator.create_report_charts(corr, results_by_model, ranking)
    chart_paths = chart_orchestrator.save_charts(charts, output_dir / charts_directory)

    content = ReportContent(
        project_name=getattr(config, 'project_name', 'wle'),
        training_shape=training_data.shape,
        quiz_shape=quiz_data.shape,
        train_shape=train_data.shape,
        validation_shape=validation_data.shape,
        class_distribution=y_train.value_counts().sort_index(),
        cleaning_results=cleaning_results,
        high_correlation_pairs=high_correlation_pairs,
        results_by_model=results_by_model,
        ranking=ranking,
        best_model=best_model,
        quiz_predictions=quiz_predictions,
        chart_paths=chart_paths,
        quiz_predictions_path=quiz_predictions_path
    )
    content.report_path = report_builder.build_report(content, output_dir)

    app_logger.structured_log(
        logging.INFO,
        "Pipeline completed successfully",
        best_model=best_model.model_name,
        accuracy=best_model.metrics.accuracy,
        report_path=str(content.report_path)
    )
    return content


def main(argv: Optional[List[str]] = None) -> None:
    """Build the container, configure logging and run the pipeline."""
    parser = argparse.ArgumentParser(description="Exercise quality classification report")
    parser.add_argument('--config-dir', type=Path, default=None,
                        help="Directory holding app_config.yaml and the core/ configs")
    args = parser.parse_args(argv)

    container, config, app_logger = _bootstrap(args.config_dir)
    try:
        app_logger.structured_log(
            logging.INFO,
            "Starting exercise quality report",
            project_name=getattr(config, 'project_name', None),
            config_dir=str(config.config_dir)
        )

        with app_logger.log_context(project_name=getattr(config, 'project_name', None)):
            run_pipeline(
                config=config,
                data_access=container.data_access(),
                data_validator=container.data_validator(),
                data_splitter=container.data_splitter(),
                data_cleaner=container.data_cleaner(),
                correlation_explorer=container.correlation_explorer(),
                model_tester=container.model_tester(),
                model_selector=container.model_selector(),
                chart_orchestrator=container.chart_orchestrator(),
                quiz_predictor=container.quiz_predictor(),
                report_builder=container.report_builder(),
                app_logger=app_logger
            )

    except ErrorHandler as e:
        _handle_known_error(app_logger, e)
    except Exception as e:
        _handle_unexpected_error(app_logger, e)


def _bootstrap(config_dir: Optional[Path]):
    """Load the configuration and set up logging. Any failure here is a configuration error."""
    try:
        container = create_container(config_dir)
        config = container.config()
        app_logger = container.app_logger()
        app_logger.setup(config.core.app_logging_config.log_file)
        return container, config, app_logger
    except Exception as e:
        # No log file yet, so report through the root logger
        logging.getLogger(__name__).critical(
            "Configuration could not be loaded from %s: %s", config_dir, e, exc_info=True
        )
        sys.exit(ConfigurationError.exit_code)


def _handle_known_error(app_logger, e: ErrorHandler):
    # Stage errors log themselves when raised
    app_logger.structured_log(logging.ERROR, "Pipeline stopped",
                              error_type=type(e).__name__,
                              exit_code=e.exit_code)
    sys.exit(e.exit_code)


def _handle_unexpected_error(app_logger, e: Exception):
    if app_logger.is_ready:
        app_logger.structured_log(logging.CRITICAL, "Unexpected error occurred",
                                  error_message=str(e),
                                  error_type=type(e).__name__,
                                  traceback=traceback.format_exc())
    else:
        logging.getLogger(__name__).critical("Unexpected error occurred: %s", e, exc_info=True)
    sys.exit(ErrorHandler.exit_code)


if __name__ == "__main__":
    main()
