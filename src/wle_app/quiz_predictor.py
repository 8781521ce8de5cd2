import logging
from pathlib import Path
import pandas as pd

from wle_framework.core.config_management.base_config_manager import BaseConfigManager
from wle_framework.core.app_logging.base_app_logger import BaseAppLogger
from wle_framework.core.error_handling.error_handler_factory import ErrorHandlerFactory
from wle_framework.framework.data_access.base_data_access import BaseDataAccess
from wle_framework.framework.data_classes import ModelTrainingResults
from wle_framework.model_testing.base_model_testing import BaseModelTester
from wle_framework.preprocessing.base_preprocessor import BasePreprocessor


class QuizPredictor:
    """Predicts the held-out quiz set with the selected model."""

    def __init__(self,
                 config: BaseConfigManager,
                 model_tester: BaseModelTester,
                 data_cleaner: BasePreprocessor,
                 data_access: BaseDataAccess,
                 app_logger: BaseAppLogger,
                 error_handler: ErrorHandlerFactory):
        self.config = config
        self.model_tester = model_tester
        self.data_cleaner = data_cleaner
        self.data_access = data_access
        self.app_logger = app_logger
        self.error_handler = error_handler
        self.quiz_id_column = getattr(config, 'quiz_id_column', 'problem_id')

    def predict(self, quiz_df: pd.DataFrame, results: ModelTrainingResults) -> pd.DataFrame:
        """Return a problem_id/prediction table for the quiz set."""
        cleaned = self.data_cleaner.transform(
            quiz_df,
            require_label=False,
            passthrough_columns=[self.quiz_id_column]
        )
        try:
            features = cleaned[results.feature_names]
            predictions = self.model_tester.predict(results, features)
        except Exception as e:
            raise self.error_handler.create_error_handler(
                'model_evaluation',
                "Error predicting quiz set",
                error_message=str(e),
                model_name=results.model_name
            )

        quiz_predictions = pd.DataFrame({
            self.quiz_id_column: cleaned[self.quiz_id_column].to_numpy(),
            'prediction': predictions
        })

        self.app_logger.structured_log(
            logging.INFO,
            "Quiz set predicted",
            model_name=results.model_name,
            n_predictions=len(quiz_predictions),
            prediction_counts=quiz_predictions['prediction'].value_counts().sort_index().to_dict()
        )
        return quiz_predictions

    def save(self, quiz_predictions: pd.DataFrame, output_dir: Path) -> Path:
        file_name = getattr(self.config.core.model_testing_config, 'quiz_predictions_file',
                            'quiz_predictions.csv')
        path = Path(output_dir) / file_name
        self.data_access.save_dataframe(quiz_predictions, path)
        return path
