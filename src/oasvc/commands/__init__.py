"""Built-in CLI sub-commands for oasvc.

* :mod:`~oasvc.commands.extract` -- dump the extracted services as JSON.
* :mod:`~oasvc.commands.inspect` -- tables and details for services and
  operations.

Single commands export a plain callback registered on the root app;
command groups export a :class:`typer.Typer` sub-application.
"""
