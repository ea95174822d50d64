from setup.step_executor import execute_step


def test_execute_step_success(mocker, app_settings, mock_logger):
    step = mocker.Mock(return_value=None)

    assert execute_step("APACHE_INSTALL", "Install Apache", step, app_settings, mock_logger) is True
    step.assert_called_once_with(app_settings, mock_logger)
    mock_logger.info.assert_any_call(
        "--- ✅ Successfully completed: Install Apache (APACHE_INSTALL) ---",
        exc_info=False,
    )


def test_execute_step_exception_is_failure(mocker, app_settings, mock_logger):
    step = mocker.Mock(side_effect=RuntimeError("apt-get exploded"))

    assert execute_step("APACHE_INSTALL", "Install Apache", step, app_settings, mock_logger) is False
    mock_logger.error.assert_any_call("❌ FAILED: Install Apache (APACHE_INSTALL)", exc_info=False)
    mock_logger.error.assert_any_call("   Error details: apt-get exploded", exc_info=True)


def test_execute_step_false_return_is_failure(mocker, app_settings, mock_logger):
    step = mocker.Mock(return_value=False)

    assert execute_step("MYSQL_INSTALL", "Install MySQL", step, app_settings, mock_logger) is False


def test_execute_step_truthy_return_is_success(mocker, app_settings, mock_logger):
    step = mocker.Mock(return_value="done")

    assert execute_step("PHP_INSTALL", "Install PHP", step, app_settings, mock_logger) is True
