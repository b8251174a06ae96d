from apc_progress.app.course_app import main


raise SystemExit(main())
