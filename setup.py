import setuptools

setuptools.setup(
	name='rulescan',
	version='0.1.0',
	packages=[
		'rulescan',
		'rulescan.scanning',
		'rulescan.support',
	],
	package_data={'rulescan': ['default.tok']},
	description='A first-match-wins lexical scanner driven by an editable grammar of regular expressions',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	python_requires='>=3.9',
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Compilers",
		"Development Status :: 3 - Alpha",
	],
)
